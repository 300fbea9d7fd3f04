#!/usr/bin/env python3
"""
PyLearn Tutor - Main Entry Point

Usage:
    python run.py ask "What is a variable?" --page /module-1.html
    python run.py chat --page /python-starter/starter-mad-libs.html
    python run.py config --backend ollama --model llama3.2:1b
    python run.py test-backend ollama
    python run.py progress --complete 2 --score 90
"""

import argparse
import asyncio
import html
import re
import sys

from constants.defaults import DEFAULT_PAGE, MODES, TOTAL_MODULES
from constants.llm import BACKEND_EMBEDDED, BACKENDS
from flow import TutorSession, ask_tutor
from utils.call_llm import probe_backend
from utils.state import TutorApp

EXIT_WORDS = ("exit", "quit")


def html_to_text(markup: str) -> str:
    """Rough plain-text rendering of tutor HTML for the terminal."""
    text = re.sub(r"<br\s*/?>", "\n", markup)
    text = re.sub(r"</p>\s*<p>", "\n\n", text)
    text = re.sub(r"</?pre>", "\n", text)
    text = re.sub(r"<[^>]+>", "", text)
    return html.unescape(text).strip()


def print_progress(update) -> None:
    print(f"  ⏳ {update.text} [{update.progress * 100:.0f}%]")


async def ensure_model_loaded(app: TutorApp) -> bool:
    """Load the embedded model when it is the active backend."""
    if app.settings.backend != BACKEND_EMBEDDED or app.model.is_ready:
        return True
    print("Loading embedded model (first run downloads ~500MB)...")
    try:
        await app.model.load(app.settings.active_config(), print_progress)
    except Exception as e:
        print(f"⚠️  Model load failed: {e}")
        print("   Answers will use limited fallback mode.")
        return False
    print("✅ AI model loaded! Ask me anything about Python.")
    return True


def show_settings(app: TutorApp) -> None:
    settings = app.settings
    name, description = settings.describe(settings.backend)
    print("=" * 60)
    print(f"Mode: {settings.mode}")
    print(f"Backend: {name} - {description}")
    for key, value in vars(settings.active_config()).items():
        if key == "api_key" and value:
            value = "********"
        print(f"  {key}: {value or '-'}")
    print("=" * 60)


def show_stats(app: TutorApp) -> None:
    stats = app.progress.get_stats()
    average = f"{stats['average_score']}%" if stats["average_score"] is not None else "-"
    print(f"Modules completed: {stats['modules_completed']}/{stats['total_modules']}")
    print(f"Average quiz score: {average}")
    print(f"Practice problems: {stats['practice_count']}")
    print(f"Progress: {stats['percent_complete']}% Complete")


# =============================================================================
# SUBCOMMANDS
# =============================================================================

async def cmd_ask(app: TutorApp, args) -> int:
    if args.mode or args.backend:
        app.settings.update(mode=args.mode, backend=args.backend)
    await ensure_model_loaded(app)

    response = await ask_tutor(args.question, app, args.page)
    print(response.html if args.html else html_to_text(response.html))
    return 1 if response.is_error else 0


async def cmd_chat(app: TutorApp, args) -> int:
    await ensure_model_loaded(app)
    session = TutorSession(app, args.page)
    print(f"🤖 Tutor ready ({app.settings.mode} mode). Type 'exit' to leave.")

    while True:
        try:
            question = (await asyncio.to_thread(input, "\nYou: ")).strip()
        except (EOFError, KeyboardInterrupt):
            print()
            return 0
        if not question:
            continue
        if question.lower() in EXIT_WORDS:
            return 0

        response = await session.ask(question)
        print(f"\nTutor: {html_to_text(response.html)}")


def cmd_config(app: TutorApp, args) -> int:
    config = {
        "base_url": args.base_url,
        "model": args.model,
        "api_key": args.api_key,
        "model_id": args.model_id,
        "model_file": args.model_file,
        "model_path": args.model_path,
    }
    try:
        app.settings.update(mode=args.mode, backend=args.backend, config=config)
    except ValueError as e:
        print(f"Error: {e}")
        return 1
    show_settings(app)
    return 0


def cmd_test_backend(app: TutorApp, args) -> int:
    backend = args.backend or app.settings.backend
    result = probe_backend(backend, app.settings.backend_config(backend))
    mark = "✓" if result.success else "✗"
    print(f"{mark} {backend}: {result.message}")
    return 0 if result.success else 1


def cmd_progress(app: TutorApp, args) -> int:
    if args.complete is not None:
        try:
            app.progress.complete_module(args.complete, args.score)
        except ValueError as e:
            print(f"Error: {e}")
            return 1
    if args.practice:
        app.progress.add_practice()
    show_stats(app)
    return 0


# =============================================================================
# ARGUMENT PARSING
# =============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Ask the PyLearn AI tutor about Python.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run.py ask "What is a variable?" --page /module-1.html
  python run.py chat --page /cs50-ai/ai-week-2.html
  python run.py config --mode solution
  python run.py config --backend openai --base-url http://localhost:8080/v1
  python run.py test-backend ollama
        """
    )
    parser.add_argument(
        "--data-dir",
        help="Directory holding saved settings and progress (default: ~/.pylearn)."
    )
    sub = parser.add_subparsers(dest="command", required=True)

    ask = sub.add_parser("ask", help="Ask one question and print the answer.")
    ask.add_argument("question", help="The question to ask.")
    ask.add_argument("--page", default=DEFAULT_PAGE, help="Lesson path you are viewing.")
    ask.add_argument("--mode", choices=MODES, help="Switch tutoring mode first (saved).")
    ask.add_argument("--backend", choices=BACKENDS, help="Switch backend first (saved).")
    ask.add_argument("--html", action="store_true", help="Print raw HTML instead of text.")

    chat = sub.add_parser("chat", help="Interactive chat with the tutor.")
    chat.add_argument("--page", default=DEFAULT_PAGE, help="Lesson path you are viewing.")

    config = sub.add_parser("config", help="Show or change tutor settings.")
    config.add_argument("--mode", choices=MODES, help="guide (Socratic) or solution (direct).")
    config.add_argument("--backend", choices=BACKENDS, help="Which LLM backend to use.")
    config.add_argument("--base-url", help="Server URL (ollama / openai backends).")
    config.add_argument("--model", help="Model name (ollama / openai backends).")
    config.add_argument("--api-key", help="API key (openai backend).")
    config.add_argument("--model-id", help="Hugging Face GGUF repo (embedded backend).")
    config.add_argument("--model-file", help="GGUF file name or glob (embedded backend).")
    config.add_argument("--model-path", help="Local .gguf file (embedded backend).")

    test = sub.add_parser("test-backend", help="Check that a backend is reachable.")
    test.add_argument("backend", nargs="?", choices=BACKENDS, help="Defaults to the active backend.")

    progress = sub.add_parser("progress", help="Show or update lesson progress.")
    progress.add_argument(
        "--complete", type=int, metavar="N",
        help=f"Mark module N (1-{TOTAL_MODULES}) completed."
    )
    progress.add_argument("--score", type=int, help="Quiz score for --complete.")
    progress.add_argument("--practice", action="store_true", help="Count one practice problem.")

    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    app = TutorApp.from_data_dir(args.data_dir)

    if args.command == "ask":
        return asyncio.run(cmd_ask(app, args))
    if args.command == "chat":
        return asyncio.run(cmd_chat(app, args))
    if args.command == "config":
        return cmd_config(app, args)
    if args.command == "test-backend":
        return cmd_test_backend(app, args)
    return cmd_progress(app, args)


if __name__ == "__main__":
    sys.exit(main())
