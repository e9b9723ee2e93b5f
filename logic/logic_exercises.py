from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class Exercise:
    """Static catalog entry; completing it costs `spoons` from today's budget."""
    id: str
    title: str
    icon: str
    duration: int  # minutes
    spoons: int
    steps: Tuple[str, ...]


EXERCISES: Tuple[Exercise, ...] = (
    Exercise(
        id="stretch-5",
        title="5-minute relief stretch",
        icon="🧘‍♀️",
        duration=5,
        spoons=1,
        steps=(
            "Gentle neck circles - 30s",
            "Shoulders forward/back - 45s",
            "Chest opener against the wall - 60s",
            "Calf and thigh stretch - 2 min",
            "Loosely shake out - 45s",
        ),
    ),
    Exercise(
        id="breath-4-7-8",
        title="4-7-8 breathing",
        icon="🌬️",
        duration=3,
        spoons=0,
        steps=(
            "Breathe in for 4 seconds",
            "Hold for 7 seconds",
            "Breathe out for 8 seconds",
            "4-6 repetitions",
        ),
    ),
    Exercise(
        id="body-scan",
        title="Mini body scan",
        icon="🧠",
        duration=5,
        spoons=0,
        steps=(
            "Sit upright or lie down, close your eyes",
            "Move your attention from head to toe",
            "Where you notice tension: one deep breath, then gently release",
        ),
    ),
)


def get_exercise(exercise_id: str) -> Optional[Exercise]:
    for ex in EXERCISES:
        if ex.id == exercise_id:
            return ex
    return None


def exercise_markdown(ex: Exercise) -> str:
    lines = [
        f"### {ex.icon} {ex.title}",
        f"Duration ~{ex.duration} min · Spoons {ex.spoons}",
        "",
    ]
    lines += [f"{i}. {step}" for i, step in enumerate(ex.steps, start=1)]
    return "\n".join(lines)
