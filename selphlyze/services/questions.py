from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Question:
    id: int
    prompt: str
    options: Tuple[str, ...]


QUESTION_BANK: Tuple[Question, ...] = (
    Question(
        id=1,
        prompt="When facing a challenging decision at work, you typically:",
        options=(
            "Analyze all available data and create a detailed plan",
            "Trust your instincts and make a quick decision",
            "Seek advice from colleagues and mentors",
            "Consider how the decision affects everyone involved",
            "Look for creative alternatives to traditional approaches",
            "Focus on the most practical and efficient solution",
        ),
    ),
    Question(
        id=2,
        prompt="In social situations, you find yourself:",
        options=(
            "Naturally gravitating toward small, intimate conversations",
            "Energized by meeting new people and large gatherings",
            "Observing others before joining conversations",
            "Taking the initiative to introduce people to each other",
            "Preferring meaningful discussions over small talk",
            "Adapting your communication style to different personalities",
        ),
    ),
    Question(
        id=3,
        prompt="When learning something new, you prefer to:",
        options=(
            "Read comprehensive guides and documentation first",
            "Jump in and learn through hands-on experimentation",
            "Watch others demonstrate before trying yourself",
            "Break down the learning into structured, sequential steps",
            "Connect new information to concepts you already understand",
            "Collaborate with others to learn together",
        ),
    ),
    Question(
        id=4,
        prompt="Your ideal weekend would involve:",
        options=(
            "Pursuing a personal hobby or creative project",
            "Exploring new places or trying new experiences",
            "Spending quality time with close friends or family",
            "Organizing and planning for the week ahead",
            "Reading, learning, or engaging in intellectual activities",
            "Participating in group activities or community events",
        ),
    ),
    Question(
        id=5,
        prompt="When working on a team project, you naturally:",
        options=(
            "Take on the role of coordinator and ensure deadlines are met",
            "Generate innovative ideas and creative solutions",
            "Focus on the details and quality of the final output",
            "Facilitate communication and resolve conflicts",
            "Research thoroughly and provide factual insights",
            "Support others and ensure everyone's voice is heard",
        ),
    ),
    Question(
        id=6,
        prompt="In stressful situations, you tend to:",
        options=(
            "Stay calm and methodically work through the problem",
            "Take action immediately to address the situation",
            "Step back and reflect on the bigger picture",
            "Seek support and guidance from others",
            "Focus on what you can control and let go of what you can't",
            "Use humor or positivity to lighten the mood",
        ),
    ),
    Question(
        id=7,
        prompt="Your communication style is best described as:",
        options=(
            "Direct and to the point",
            "Enthusiastic and expressive",
            "Thoughtful and carefully considered",
            "Empathetic and supportive",
            "Logical and evidence-based",
            "Diplomatic and collaborative",
        ),
    ),
    Question(
        id=8,
        prompt="When making personal decisions, you:",
        options=(
            "Weigh the pros and cons systematically",
            "Follow your heart and emotions",
            "Consider long-term consequences carefully",
            "Think about how it impacts your relationships",
            "Seek multiple perspectives before deciding",
            "Choose the option that aligns with your values",
        ),
    ),
    Question(
        id=9,
        prompt="You feel most fulfilled when:",
        options=(
            "Achieving specific goals and seeing measurable results",
            "Helping others grow and succeed",
            "Creating something original and meaningful",
            "Solving complex problems or puzzles",
            "Building strong relationships and connections",
            "Contributing to something larger than yourself",
        ),
    ),
    Question(
        id=10,
        prompt="Your approach to planning is:",
        options=(
            "Detailed schedules with specific timelines",
            "Flexible frameworks that allow for spontaneity",
            "General direction with room for adjustments",
            "Collaborative planning involving others' input",
            "Contingency planning for multiple scenarios",
            "Minimal planning, preferring to adapt as you go",
        ),
    ),
)


def question_count() -> int:
    return len(QUESTION_BANK)


def option_count(index: int) -> int:
    return len(QUESTION_BANK[index].options)
