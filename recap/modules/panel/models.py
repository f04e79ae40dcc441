from enum import Enum
from typing import List, Optional

from pydantic import BaseModel

from recap.modules.summarize.v1.models import SummaryResult


class PanelState(Enum):
    NO_TRANSCRIPT = 'no-transcript'
    IDLE = 'idle'
    LOADING = 'loading'
    RESULT = 'result'
    ERROR = 'error'


# only one of these is visible at a time, the error banner is rendered on top of it
class PanelView(Enum):
    NO_TRANSCRIPT = 'no-transcript'
    IDLE = 'idle'
    LOADING = 'loading'
    RESULT = 'result'


class PanelAction(Enum):
    GENERATE = 'generate'
    REGENERATE = 'regenerate'
    RESET = 'reset'
    COPY = 'copy'


class PanelRender(BaseModel):
    view: PanelView
    message: Optional[str] = None
    error: Optional[str] = None
    copied: bool = False
    result: Optional[SummaryResult] = None
    actions: List[PanelAction] = []
