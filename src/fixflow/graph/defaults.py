"""Built-in troubleshooting flow.

Used whenever no valid custom flow has been persisted. The steps are
frozen dataclasses, so the constant can be shared freely.
"""

from __future__ import annotations

from fixflow.graph.model import Answer, Step, TroubleshootingGraph

START_ID = "start"
SOLUTION_PREFIX = "Solution: "

DEFAULT_STEPS: tuple[Step, ...] = (
    Step(
        id="start",
        question="What is the problem with the process?",
        answers=(
            Answer("It's not starting", "not-starting", "Play"),
            Answer("It's running slow", "running-slow", "Gauge"),
            Answer("It crashed", "crashed", "XMarkCircle"),
        ),
    ),
    Step(
        id="not-starting",
        question="Have you checked the logs for startup errors?",
        answers=(
            Answer("Yes, there are errors", "log-errors", "Document"),
            Answer("No, where are the logs?", "find-logs", "QuestionMark"),
            Answer("There are no logs at all", "no-logs", "ExclamationMark"),
        ),
    ),
    Step(
        id="running-slow",
        question="Is the CPU usage high?",
        answers=(
            Answer("Yes, CPU is at 100%", "high-cpu", "ComputerChip"),
            Answer("No, CPU is normal", "normal-cpu", "Leaf"),
        ),
    ),
    Step(
        id="crashed",
        question="Was there a crash report generated?",
        answers=(
            Answer("Yes, I have the report", "submit-report", "Upload"),
            Answer("No, it just disappeared", "check-system-logs", "Terminal"),
        ),
    ),
    Step(
        id="log-errors",
        question="Common errors include 'Permission Denied' or 'Port in Use'.",
        answers=(
            Answer(
                "Solution: Check file permissions or kill the process on that port.",
                None,
                "Wrench",
            ),
        ),
    ),
    Step(
        id="find-logs",
        question="Logs are usually in /var/log/ or the application's own directory.",
        answers=(Answer("Okay, I'll check there.", None, "Check"),),
    ),
    Step(
        id="no-logs",
        question="This might indicate a problem with file permissions for the log directory.",
        answers=(
            Answer(
                "Solution: Verify the process has write access to its log location.",
                None,
                "Wrench",
            ),
        ),
    ),
    Step(
        id="high-cpu",
        question="This could be an infinite loop or heavy processing.",
        answers=(Answer("Solution: Use a profiler to inspect the process.", None, "Wrench"),),
    ),
    Step(
        id="normal-cpu",
        question="The bottleneck might be I/O (disk or network).",
        answers=(Answer("Solution: Check disk activity and network requests.", None, "Wrench"),),
    ),
    Step(
        id="submit-report",
        question="Please submit the crash report to the development team.",
        answers=(Answer("Done!", None, "Check"),),
    ),
    Step(
        id="check-system-logs",
        question="Check the main system logs for any related error messages.",
        answers=(Answer("Okay, I'll check system logs.", None, "Check"),),
    ),
)


def default_graph() -> TroubleshootingGraph:
    """Return a fresh graph holding the built-in flow."""
    return TroubleshootingGraph.from_steps(DEFAULT_STEPS)
