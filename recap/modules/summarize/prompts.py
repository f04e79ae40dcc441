system_message = (
    'You are a helpful assistant that analyzes transcripts and provides summaries, key points, '
    'and sentiment analysis. Always respond with valid JSON.'
)


correction_instructions = """Please analyze the following transcript and provide:

1) First, correct the raw transcript internally:
   - Fix grammar, punctuation, spelling, and fill obvious missing words to make the transcript readable while preserving original meaning and speaker voice.
   - Mark any uncertain or inferred insertions with square brackets, e.g. "[probably]".
   - Do NOT include the corrected transcript in the final output; use the corrected transcript only to produce the summary and key points.
   - Do not invent facts or add new claims not implied by the original text."""


summary_instructions = """2) Then, produce:
   a. A full, thorough summary (no length limit) that captures every meaningful idea, context, nuance, and relevant inference. If you make any high-level inferences (tone, intent, context), label them explicitly as an inference.
   b. Key points as an array containing as many items as needed to cover all significant details from the transcript (no fixed number)."""


sentiment_instructions = """   c. The overall sentiment of the transcript as a short label (for example "Positive", "Negative", "Neutral" or "Mixed")."""


output_format = """Output MUST be valid JSON only (no extra text) and MUST follow this exact structure — do not add, remove, or rename fields:

{
  "summary": "your full, unlimited-length summary here",
  "keyPoints": ["point 1", "point 2", "point 3", "... add as many points as needed ..."]
}"""


output_format_with_sentiment = """Output MUST be valid JSON only (no extra text) and MUST follow this exact structure — do not add, remove, or rename fields:

{
  "summary": "your full, unlimited-length summary here",
  "keyPoints": ["point 1", "point 2", "point 3", "... add as many points as needed ..."],
  "sentiment": "overall sentiment label"
}"""


summary_prompt = f"""{correction_instructions}

{summary_instructions}

{output_format}"""


summary_with_sentiment_prompt = f"""{correction_instructions}

{summary_instructions}
{sentiment_instructions}

{output_format_with_sentiment}"""
