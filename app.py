import argparse
import logging
import os
import random
import sys
from functools import partial

_parser = argparse.ArgumentParser(add_help=False)
_parser.add_argument("--data-dir", type=str, default=None)
_parser.add_argument("--log-level", type=str, default=None)
_args, _unknown = _parser.parse_known_args(sys.argv[1:])
if _args.data_dir is not None:
    os.environ["HEALTH_DATA_DIR"] = _args.data_dir
if _args.log_level is not None:
    os.environ["LOG_LEVEL"] = _args.log_level

import gradio as gr

from app_config import LOG_LEVEL, SHARE_UI
from dash_board import DAILY_TIPS, DASHBOARD_TXT, knowledge_markdown, next_tip_index, tip_markdown
from logic.logic_exercises import EXERCISES, exercise_markdown
from logic.logic_session import HealthSession
from logic.logic_views import (
    DEFAULT_FORM,
    adjust_spoons_action,
    complete_exercise_action,
    delete_entry_action,
    export_csv_action,
    home_view_action,
    load_entry_action,
    recent_entries_frame,
    reset_all_action,
    reset_spoons_action,
    save_entry_action,
    set_capacity_action,
    spoons_markdown,
    trend_frame,
)
from state_io import StateGateway
from storage import ensure_base_dir, today_str

logging.basicConfig(
    level=getattr(logging, LOG_LEVEL, logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    stream=sys.stdout,
)

PAGES = ["home", "tracker", "trend", "exercises", "knowledge", "settings"]


def switch_page(page_name: str):
    """Return visibility updates for all main pages based on the active page name."""
    return tuple(gr.update(visible=(page_name == p)) for p in PAGES)


ensure_base_dir()
session = HealthSession.open(StateGateway())

with gr.Blocks(title="Fibro Balance") as demo:
    tip_index_state = gr.State(random.randrange(len(DAILY_TIPS)))

    with gr.Row():
        # Left navigation
        with gr.Column(scale=1, min_width=180):
            gr.Markdown("### Navigation")
            btn_home = gr.Button("🏠 Home")
            btn_tracker = gr.Button("📝 Tracker")
            btn_trend = gr.Button("📈 Trend (14 days)")
            btn_exercises = gr.Button("🧘 Exercises")
            btn_knowledge = gr.Button("📚 Knowledge")
            btn_settings = gr.Button("⚙️ Settings")

        # Right content
        with gr.Column(scale=4):
            # Home
            with gr.Column(visible=True) as page_home:
                gr.Markdown(DASHBOARD_TXT)
                with gr.Row():
                    with gr.Column(scale=2):
                        home_today = gr.Markdown("")
                        home_averages = gr.Markdown("")
                    with gr.Column(scale=1):
                        home_tip = gr.Markdown("")
                        next_tip_btn = gr.Button("New tip")
                        home_spoons = gr.Markdown("")

            # Tracker
            with gr.Column(visible=False) as page_tracker:
                gr.Markdown("## 📝 Create entry")
                with gr.Row():
                    entry_date = gr.Textbox(label="Date (YYYY-MM-DD)", value=today_str())
                    load_entry_btn = gr.Button("Load or create record")
                with gr.Row():
                    entry_pain = gr.Number(label="Pain (0-10)", value=DEFAULT_FORM["pain"])
                    entry_fatigue = gr.Number(label="Fatigue (0-10)", value=DEFAULT_FORM["fatigue"])
                    entry_mood = gr.Number(label="Mood (1-5)", value=DEFAULT_FORM["mood"])
                with gr.Row():
                    entry_sleep = gr.Number(label="Sleep (hours)", value=DEFAULT_FORM["sleep"])
                    entry_stress = gr.Number(label="Stress (0-10)", value=DEFAULT_FORM["stress"])
                entry_notes = gr.Textbox(
                    label="Notes",
                    lines=3,
                    max_lines=6,
                    placeholder="Triggers, weather, food, medication …",
                )
                with gr.Row():
                    save_entry_btn = gr.Button("Save", variant="primary")
                    delete_entry_btn = gr.Button("Delete entry for this date", variant="stop")
                entry_status = gr.Markdown("")

                gr.Markdown("### Recent entries")
                recent_table = gr.Dataframe(value=recent_entries_frame(session), interactive=False)

            # Trend
            with gr.Column(visible=False) as page_trend:
                gr.Markdown("## 📈 Trend (last 14 entries)")
                trend_table = gr.Dataframe(value=trend_frame(session), interactive=False)

            # Exercises
            with gr.Column(visible=False) as page_exercises:
                gr.Markdown("## 🧘 Exercises")
                exercise_status = gr.Markdown("")
                exercise_buttons = []
                for ex in EXERCISES:
                    gr.Markdown(exercise_markdown(ex))
                    exercise_buttons.append((ex.id, gr.Button(f"Done: {ex.title}")))

                exercises_spoons = gr.Markdown(spoons_markdown(session))
                with gr.Row():
                    spoons_minus_btn = gr.Button("-1")
                    spoons_plus_btn = gr.Button("+1")
                    spoons_reset_btn = gr.Button("Reset")

            # Knowledge
            with gr.Column(visible=False) as page_knowledge:
                gr.Markdown(knowledge_markdown())

            # Settings
            with gr.Column(visible=False) as page_settings:
                gr.Markdown("## ⚙️ Settings")
                gr.Markdown("### Data")
                export_btn = gr.Button("Export CSV")
                export_file = gr.File(label="CSV download", interactive=False)
                confirm_reset = gr.Checkbox(label="Yes, really delete all data", value=False)
                reset_all_btn = gr.Button("Delete everything", variant="stop")
                settings_status = gr.Markdown("")

                gr.Markdown("### Spoon settings")
                capacity_input = gr.Number(label="Daily spoons (1-30)", value=session.budget.total)
                capacity_btn = gr.Button("Save daily spoons")
                settings_spoons = gr.Markdown(spoons_markdown(session))

    pages = [page_home, page_tracker, page_trend, page_exercises, page_knowledge, page_settings]
    home_outputs = [home_today, home_averages, home_spoons]
    entry_form = [entry_date, entry_pain, entry_fatigue, entry_mood, entry_sleep, entry_stress, entry_notes]

    # ====== Event bindings ======

    demo.load(partial(home_view_action, session), inputs=None, outputs=home_outputs)
    demo.load(tip_markdown, inputs=[tip_index_state], outputs=[home_tip])

    next_tip_btn.click(
        next_tip_index,
        inputs=[tip_index_state],
        outputs=[tip_index_state],
    ).then(
        tip_markdown,
        inputs=[tip_index_state],
        outputs=[home_tip],
    )

    # Navigation
    btn_home.click(lambda: switch_page("home"), inputs=None, outputs=pages).then(
        partial(home_view_action, session), inputs=None, outputs=home_outputs
    )
    btn_tracker.click(lambda: switch_page("tracker"), inputs=None, outputs=pages).then(
        partial(recent_entries_frame, session), inputs=None, outputs=[recent_table]
    )
    btn_trend.click(lambda: switch_page("trend"), inputs=None, outputs=pages).then(
        partial(trend_frame, session), inputs=None, outputs=[trend_table]
    )
    btn_exercises.click(lambda: switch_page("exercises"), inputs=None, outputs=pages).then(
        partial(spoons_markdown, session), inputs=None, outputs=[exercises_spoons]
    )
    btn_knowledge.click(lambda: switch_page("knowledge"), inputs=None, outputs=pages)
    btn_settings.click(lambda: switch_page("settings"), inputs=None, outputs=pages).then(
        partial(spoons_markdown, session), inputs=None, outputs=[settings_spoons]
    )

    # Tracker
    load_entry_btn.click(
        partial(load_entry_action, session),
        inputs=[entry_date],
        outputs=[*entry_form, entry_status],
    )
    save_entry_btn.click(
        partial(save_entry_action, session),
        inputs=entry_form,
        outputs=[entry_status, recent_table],
    )
    delete_entry_btn.click(
        partial(delete_entry_action, session),
        inputs=[entry_date],
        outputs=[entry_status, recent_table],
    )

    # Exercises & spoons
    for exercise_id, button in exercise_buttons:
        button.click(
            partial(complete_exercise_action, session, exercise_id),
            inputs=None,
            outputs=[exercise_status, exercises_spoons],
        )
    spoons_minus_btn.click(partial(adjust_spoons_action, session, -1), inputs=None, outputs=[exercises_spoons])
    spoons_plus_btn.click(partial(adjust_spoons_action, session, 1), inputs=None, outputs=[exercises_spoons])
    spoons_reset_btn.click(partial(reset_spoons_action, session), inputs=None, outputs=[exercises_spoons])

    # Settings
    export_btn.click(partial(export_csv_action, session), inputs=None, outputs=[export_file, settings_status])
    reset_all_btn.click(
        partial(reset_all_action, session),
        inputs=[confirm_reset],
        outputs=[settings_status, confirm_reset, recent_table, settings_spoons],
    )
    capacity_btn.click(
        partial(set_capacity_action, session),
        inputs=[capacity_input],
        outputs=[settings_status, settings_spoons],
    )

if __name__ == "__main__":
    session.start_rollover()
    try:
        demo.launch(share=SHARE_UI)
    finally:
        session.close()
