from enum import Enum


class EventKind(str, Enum):
    demographics_submitted = "demographics_submitted"
    test_started = "test_started"
    test_completed = "test_completed"
    results_viewed = "results_viewed"
