"""
Tests for the terminal client.
"""

import itertools
import json

import httpx

from conftest import sample_analysis
from selphlyze.cli import (
    ask_choice,
    build_parser,
    cmd_analytics,
    cmd_take,
    collect_demographics,
    main,
    result_payload,
    run_quiz,
)
from selphlyze.services.demographics import Demographics
from selphlyze.services.questions import QUESTION_BANK


def scripted(*lines):
    answers = iter(lines)
    return lambda prompt="": next(answers)


def ticking_clock(step=100):
    counter = itertools.count(start=0, step=step)
    return lambda: next(counter)


class RecordingApi:
    """In-process stand-in for the HTTP API."""

    def __init__(self, analyze_status=200):
        self.analyze_status = analyze_status
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content) if request.content else None
        self.requests.append((request.method, request.url.path, body))

        if request.url.path == "/api/analytics" and request.method == "POST":
            return httpx.Response(200, json={"success": True})
        if request.url.path == "/api/analytics":
            return httpx.Response(200, json={
                "analytics": [],
                "summary": {
                    "totalEvents": 2,
                    "uniqueEvents": ["test_completed"],
                    "demographics": {"countries": {"Canada": 2}, "ageRanges": {"25-34": 2}},
                },
            })
        if request.url.path == "/api/analyze":
            if self.analyze_status != 200:
                return httpx.Response(self.analyze_status, json={"error": "Failed to analyze results"})
            return httpx.Response(200, json={"analysis": sample_analysis()})
        if request.url.path == "/api/save-results":
            return httpx.Response(200, json={"success": True, "sessionId": "abc"})
        return httpx.Response(404)

    def client(self):
        return httpx.Client(base_url="http://test", transport=httpx.MockTransport(self))


class TestCollectDemographics:
    """Tests for the interactive demographics form."""

    def test_reprompts_until_valid(self, capsys):
        demographics = collect_demographics(scripted("0", "3", "x", "2", "2"))

        assert demographics == Demographics(age="25-34", gender="Female", country="Canada")
        assert "Please enter a number" in capsys.readouterr().out

    def test_non_ascii_digit_reprompts(self, capsys):
        choice = ask_choice("Gender", ["Male", "Female"], scripted("\u00b2", "2"))

        assert choice == "Female"
        assert "Please enter a number" in capsys.readouterr().out


class TestRunQuiz:
    """Tests for the interactive wizard loop."""

    def test_answers_every_question(self, demographics):
        result = run_quiz(demographics, scripted(*["1"] * 10), clock=ticking_clock())

        assert result.answers == (0,) * 10
        assert len(result.question_times_ms) == 10
        assert result.total_time_ms >= sum(result.question_times_ms)

    def test_back_and_keep_previous_answer(self, demographics):
        lines = ["3", "b", "", *["2"] * 9]
        result = run_quiz(demographics, scripted(*lines), clock=ticking_clock())

        assert result.answers == (2,) + (1,) * 9

    def test_superscript_digit_is_unrecognized(self, demographics, capsys):
        result = run_quiz(demographics, scripted("\u00b2", *["2"] * 10), clock=ticking_clock())

        assert result.answers == (1,) * 10
        assert "Unrecognized input." in capsys.readouterr().out

    def test_empty_input_without_choice_reprompts(self, demographics, capsys):
        result = run_quiz(demographics, scripted("", "9", "zzz", *["4"] * 10), clock=ticking_clock())

        assert result.answers == (3,) * 10
        out = capsys.readouterr().out
        assert "Please choose an option" in out
        assert "Unrecognized input." in out

    def test_result_payload(self, demographics):
        result = run_quiz(demographics, scripted(*["6"] * 10), clock=ticking_clock())
        payload = result_payload(result)

        assert payload["answers"] == [5] * 10
        assert payload["demographics"] == {"age": "25-34", "gender": "Female", "country": "Canada"}
        assert len(payload["questionTimes"]) == len(QUESTION_BANK)


class TestCommands:
    """Tests for the CLI subcommands."""

    def test_take_submits_analysis_and_result(self, capsys):
        api = RecordingApi()
        args = build_parser().parse_args(["take"])
        lines = ["3", "2", "2", *["1"] * 10]

        code = cmd_take(args, input_fn=scripted(*lines), client=api.client())

        assert code == 0
        paths = [(method, path) for method, path, _ in api.requests]
        assert paths == [
            ("POST", "/api/analytics"),
            ("POST", "/api/analyze"),
            ("POST", "/api/save-results"),
        ]
        saved = api.requests[-1][2]
        assert saved["selfCode"] == "A7X9P2"
        assert saved["analysis"] == sample_analysis()
        assert saved["totalTime"] >= sum(saved["questionTimes"])
        assert "YOUR SELFCODE: A7X9P2" in capsys.readouterr().out

    def test_take_reports_analysis_failure(self, capsys):
        api = RecordingApi(analyze_status=500)
        args = build_parser().parse_args(["take"])
        lines = ["3", "2", "2", *["1"] * 10]

        code = cmd_take(args, input_fn=scripted(*lines), client=api.client())

        assert code == 1
        assert "Error" in capsys.readouterr().err
        assert all(path != "/api/save-results" for _, path, _ in api.requests)

    def test_analytics_summary(self, capsys):
        api = RecordingApi()
        args = build_parser().parse_args(["analytics", "--days", "7", "--event", "test_completed"])

        assert cmd_analytics(args, client=api.client()) == 0
        out = capsys.readouterr().out
        assert "Events in the last 7 days: 2" in out
        assert "Canada: 2" in out

    def test_questions(self, capsys):
        assert main(["questions"]) == 0
        assert QUESTION_BANK[0].prompt in capsys.readouterr().out
