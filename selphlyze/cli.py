"""
Command-line client for the Selphlyze API

Runs the demographics form and the quiz wizard in the terminal, then sends
the completed quiz to a running API for analysis and storage.
"""

import argparse
import sys
import time
from datetime import datetime, timezone
from typing import Callable, List, Optional, Sequence

import httpx

from selphlyze.services.demographics import AgeRange, Country, Demographics, DemographicsForm, Gender
from selphlyze.services.events import EventKind
from selphlyze.services.questions import QUESTION_BANK
from selphlyze.services.wizard import Advance, Back, CompletedQuizResult, SelectOption, reduce, start_quiz

DEFAULT_API = "http://localhost:8000"
BACK_COMMAND = "b"

InputFn = Callable[[str], str]


def now_ms() -> int:
    return int(time.monotonic() * 1000)


def ask_choice(label: str, choices: Sequence[str], input_fn: InputFn = input) -> str:
    """Keep asking until one of the numbered choices is picked."""
    print(f"\n{label}:")
    for number, choice in enumerate(choices, start=1):
        print(f"  {number}. {choice}")

    while True:
        raw = input_fn("> ").strip()
        if raw.isdecimal() and 1 <= int(raw) <= len(choices):
            return choices[int(raw) - 1]
        print(f"Please enter a number between 1 and {len(choices)}.")


def collect_demographics(input_fn: InputFn = input) -> Demographics:
    form = DemographicsForm()
    form = form.choose("age", ask_choice("Age range", [a.value for a in AgeRange], input_fn))
    form = form.choose("gender", ask_choice("Gender", [g.value for g in Gender], input_fn))
    form = form.choose("country", ask_choice("Country", [c.value for c in Country], input_fn))
    return form.submit()


def run_quiz(
    demographics: Demographics,
    input_fn: InputFn = input,
    clock: Callable[[], int] = now_ms,
) -> CompletedQuizResult:
    state = start_quiz(demographics, clock())

    while not state.is_completed:
        question = state.current_question
        total = len(state.questions)
        print(f"\nQuestion {state.current_index + 1} of {total}")
        print(question.prompt)
        for number, option in enumerate(question.options, start=1):
            marker = "*" if state.candidate == number - 1 else " "
            print(f" {marker}{number}. {option}")

        hint = "number to answer"
        if state.candidate is not None:
            hint += ", Enter to keep your answer"
        if state.current_index > 0:
            hint += f", '{BACK_COMMAND}' to go back"
        raw = input_fn(f"({hint}) > ").strip().lower()

        if raw == BACK_COMMAND:
            state = reduce(state, Back(clock()))
            continue
        if raw.isdecimal():
            selected = reduce(state, SelectOption(int(raw) - 1))
            if selected.candidate != int(raw) - 1:
                print(f"Please choose an option between 1 and {len(question.options)}.")
                continue
            state = selected
        elif raw:
            print("Unrecognized input.")
            continue

        advanced = reduce(state, Advance(clock()))
        if advanced is state:
            print(f"Please choose an option between 1 and {len(question.options)}.")
        state = advanced

    return state.result


def result_payload(result: CompletedQuizResult) -> dict:
    return {
        "answers": list(result.answers),
        "questionTimes": list(result.question_times_ms),
        "demographics": result.demographics.model_dump(),
    }


def submit_result(client: httpx.Client, result: CompletedQuizResult) -> dict:
    payload = result_payload(result)

    response = client.post("/api/analyze", json=payload)
    response.raise_for_status()
    analysis = response.json()["analysis"]

    response = client.post("/api/save-results", json={
        **payload,
        "selfCode": analysis["selfCode"],
        "totalTime": result.total_time_ms,
        "analysis": analysis,
        "completedAt": datetime.now(timezone.utc).isoformat(),
    })
    response.raise_for_status()

    return {"analysis": analysis, "sessionId": response.json()["sessionId"]}


def print_analysis(analysis: dict) -> None:
    print("\n" + "=" * 60)
    print(f"YOUR SELFCODE: {analysis['selfCode']}")
    print("=" * 60)
    print(f"\n{analysis['personalitySummary']}")

    print("\nCore strengths:")
    for strength in analysis["coreStrengths"]:
        print(f"  • {strength}")

    print("\nGrowth areas:")
    for area in analysis["growthAreas"]:
        print(f"  • {area}")

    print(f"\nCareer insights: {analysis['careerInsights']}")
    print(f"Relationships: {analysis['relationshipDynamics']}")
    print()


def cmd_questions(args) -> int:
    for question in QUESTION_BANK:
        print(f"\n{question.id}. {question.prompt}")
        for number, option in enumerate(question.options, start=1):
            print(f"   {number}) {option}")
    return 0


def cmd_take(args, input_fn: InputFn = input, client: Optional[httpx.Client] = None) -> int:
    client = client or httpx.Client(base_url=args.api, timeout=args.timeout)
    with client:
        demographics = collect_demographics(input_fn)
        try:
            client.post("/api/analytics", json={
                "event": EventKind.test_started.value,
                "demographics": demographics.model_dump(),
            }).raise_for_status()
        except httpx.HTTPError as e:
            print(f"Warning: could not log test start: {e}", file=sys.stderr)

        result = run_quiz(demographics, input_fn)
        print("\nAnalyzing your responses...")

        try:
            submitted = submit_result(client, result)
        except httpx.HTTPError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

    print_analysis(submitted["analysis"])
    print(f"Saved as session {submitted['sessionId']}")
    return 0


def cmd_analytics(args, client: Optional[httpx.Client] = None) -> int:
    client = client or httpx.Client(base_url=args.api, timeout=args.timeout)
    params = {"days": args.days}
    if args.event:
        params["event"] = args.event

    with client:
        try:
            response = client.get("/api/analytics", params=params)
            response.raise_for_status()
        except httpx.HTTPError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

    summary = response.json()["summary"]
    print(f"Events in the last {args.days} days: {summary['totalEvents']}")
    print(f"Event kinds: {', '.join(summary['uniqueEvents']) or '-'}")

    for title, table in (
        ("Countries", summary["demographics"]["countries"]),
        ("Age ranges", summary["demographics"]["ageRanges"]),
    ):
        print(f"\n{title}:")
        for key, count in sorted(table.items(), key=lambda item: -item[1]):
            print(f"  {key}: {count}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="selphlyze",
        description="Take the Selphlyze personality quiz from the terminal",
    )
    parser.add_argument("--api", default=DEFAULT_API, help="Base URL of the Selphlyze API")
    parser.add_argument("--timeout", type=float, default=90.0, help="HTTP timeout in seconds")

    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("questions", help="List the quiz questions")
    subparsers.add_parser("take", help="Take the quiz and get an analysis")

    analytics = subparsers.add_parser("analytics", help="Show the analytics summary")
    analytics.add_argument("--days", type=int, default=30)
    analytics.add_argument("--event", choices=[e.value for e in EventKind])

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.command == "questions":
        return cmd_questions(args)
    if args.command == "take":
        return cmd_take(args)
    return cmd_analytics(args)


if __name__ == "__main__":
    sys.exit(main())
