import asyncio
import enum

# Value reported by the page while G_testRunner is still going
SENTINEL = "_running"

COMPLETION_PREDICATE = (
    "() => G_testRunner.isFinished() ? G_testRunner.isSuccess() : '_running'"
)

POLL_INTERVAL = 0.1


class Outcome(enum.Enum):
    USAGE_ERROR = 1
    NAVIGATION_ERROR = 2
    TEST_PASSED = 3
    TEST_FAILED = 4

    @property
    def exit_code(self):
        return 0 if self is Outcome.TEST_PASSED else 1


def say(line):
    print(line, flush=True)


def relay_console(text):
    say(f"Test console: {text}")


async def poll_until_finished(evaluate, interval=POLL_INTERVAL, sleep=asyncio.sleep):
    """Evaluate the completion predicate every `interval` seconds.

    Returns the runner's success flag as soon as the predicate stops
    yielding SENTINEL. There is no attempt limit.
    """
    while True:
        await sleep(interval)
        result = await evaluate()
        if result != SENTINEL:
            return bool(result)


async def run_test(url, session, interval=POLL_INTERVAL, sleep=asyncio.sleep):
    """Load `url` in `session` and wait for its test runner to finish."""
    say(f"Loading URL: {url}")

    status = await session.open(url, relay_console)
    if status != "success":
        say(f"Failed to open {url}")
        return Outcome.NAVIGATION_ERROR

    say("Running test.")

    if await poll_until_finished(session.evaluate, interval=interval, sleep=sleep):
        say("Test succeeded.")
        return Outcome.TEST_PASSED

    say("*** Test failed! ***")
    return Outcome.TEST_FAILED
