DASHBOARD_TXT = """
## 🌿 Fibro Balance – your gentle daily companion

Log how today feels, keep an eye on your energy, and take small breaks
before exhaustion arrives.

---

### 🧭 How to use the app

1. **Tracker** – record pain, fatigue, mood, sleep and stress for a day.
   Saving the same date again replaces that day's entry.
2. **Trend** – the last 14 logged days at a glance.
3. **Exercises** – short relaxation exercises. Press **Done** when finished;
   the exercise's spoons are taken from today's budget.
4. **Settings** – export everything as CSV, set your daily spoons, or
   delete all data.

Everything stays on this machine in a single JSON file under the data
directory (`HEALTH_DATA_DIR`, default `user_data/`).

---

### 🥄 Spoons

Spoons are your daily energy allowance. Completed activities use them up.
At the start of each new day the used spoons go back to zero, while your
chosen daily total stays the same.
"""


KNOWLEDGE_CARDS = [
    (
        "Pain & stress",
        "Stress can amplify pain. Short breathing breaks lower muscle tension "
        "and change how pain is perceived.",
    ),
    (
        "Sleep hygiene",
        "Regular bedtimes, less screen time in the evening and a cool, dark "
        "room support better sleep.",
    ),
    (
        "Pacing (energy management)",
        "Plan activities in small portions and take deliberate breaks before "
        "exhaustion sets in.",
    ),
]


DAILY_TIPS = [
    "Gentle is strong: 5 deep breaths before every activity.",
    "Micro-break: 90 seconds of shoulder and neck loosening.",
    "Remember to drink - one glass of water per hour.",
    "Move within your comfort zone, not your pain zone.",
    "Write down 1 trigger and 1 relief today.",
    "Sleep hygiene: avoid screens 30 minutes before bed.",
    "A short self-hug: 10 seconds, an oxytocin booster.",
]


def knowledge_markdown() -> str:
    parts = ["## 📚 Knowledge"]
    for title, body in KNOWLEDGE_CARDS:
        parts.append(f"### {title}\n{body}")
    return "\n\n".join(parts)


def next_tip_index(index: int) -> int:
    return (int(index) + 1) % len(DAILY_TIPS)


def tip_markdown(index: int) -> str:
    return f"**Tip of the day**\n\n{DAILY_TIPS[int(index) % len(DAILY_TIPS)]}"
