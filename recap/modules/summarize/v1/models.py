from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, field_validator


class SummaryPayload(BaseModel):
    text: str

    model_config = {
        'json_schema_extra': {
            'examples': [
                {
                    'text': 'Your transcript here',
                }
            ]
        }
    }


# the model output is passed through unchecked, so unknown keys are kept and
# known ones are coerced to something displayable instead of being rejected
class SummaryResult(BaseModel):
    summary: str = ''
    keyPoints: List[str] = []
    sentiment: Optional[str] = None

    model_config = ConfigDict(extra='allow')

    @field_validator('summary', mode='before')
    @classmethod
    def coerce_summary(cls, value: Any) -> str:
        return '' if value is None else str(value)

    @field_validator('keyPoints', mode='before')
    @classmethod
    def coerce_key_points(cls, value: Any) -> List[str]:
        if value is None:
            return []
        if not isinstance(value, list):
            value = [value]

        return [point if isinstance(point, str) else str(point) for point in value]

    @field_validator('sentiment', mode='before')
    @classmethod
    def coerce_sentiment(cls, value: Any) -> Optional[str]:
        return None if value is None else str(value)


class ErrorResponse(BaseModel):
    error: str
