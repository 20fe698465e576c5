"""
Prompt templates for the text steps of the pipeline.
"""

from dataclasses import dataclass


@dataclass
class PromptTemplate:
    """
    A prompt template with placeholders.

    Usage:
        template = PromptTemplate(
            template="Hello {name}!",
            description="A greeting"
        )
        result = template.format(name="World")
    """
    template: str
    description: str = ""

    def format(self, **kwargs) -> str:
        """Format the template with provided values"""
        try:
            return self.template.format(**kwargs)
        except (KeyError, ValueError, IndexError):
            # Templates with literal braces: replace only the provided keys
            result = self.template
            for k, v in kwargs.items():
                result = result.replace("{" + k + "}", str(v))
            return result

    def __str__(self) -> str:
        return f"PromptTemplate({self.description})"


# Number of key points requested per detail level
POINTS_BY_DETAIL_LEVEL = {
    "concise": "2-3",
    "standard": "3-5",
    "detailed": "5-7",
}

ORIENTATION_DESCRIPTIONS = {
    "landscape": "horizontal (16:9 aspect ratio)",
    "portrait": "vertical (9:16 aspect ratio)",
    "square": "square (1:1 aspect ratio)",
}

LANGUAGE_NOTES = {
    "ar": "The text in the infographic should be in Arabic (right-to-left).",
    "en": "The text in the infographic should be in English.",
}


ANALYSIS_PROMPTS = {
    "ar": PromptTemplate(
        template="""قم بإعطائي تقرير مفصل لنقاط الإفادة التي تم ذكرها في هذا النص:

{transcript}

أريد:
1. النقاط الرئيسية ({points_count} نقاط)
2. الإحصائيات أو الأرقام المذكورة (إن وجدت)
3. الاقتباسات المهمة (إن وجدت)
4. الخلاصة في سطر واحد

اجعل التقرير موجزًا ومفيدًا للاستخدام في تصميم Infographic.""",
        description="Key points report from a transcript (Arabic)",
    ),
    "en": PromptTemplate(
        template="""Provide a detailed report of the key points mentioned in this text:

{transcript}

I want:
1. Main points ({points_count} points)
2. Statistics or numbers mentioned (if any)
3. Important quotes (if any)
4. Summary in one line

Make the report concise and useful for designing an Infographic.""",
        description="Key points report from a transcript (English)",
    ),
}


DESIGN_PROMPT = PromptTemplate(
    template="""Based on this analysis report, generate a detailed infographic design prompt in English that can be used with an AI image generator.

Analysis Report:
{analysis_report}

Generate a visual design prompt that includes:
1. Layout structure ({orientation} infographic)
2. Color scheme (suggest specific colors)
3. Visual elements (icons, shapes)
4. Text placement
5. Overall style (modern, professional, etc.)

{language_note}{custom_note}

The prompt should be detailed enough to generate a beautiful, informative infographic.
Start directly with the design description, no introduction needed.
Keep it under 500 words.""",
    description="Image-generation prompt from an analysis report",
)


def custom_note(custom_description: str | None) -> str:
    if not custom_description or not custom_description.strip():
        return ""
    return f"\n\nUser's custom instructions: {custom_description}"
