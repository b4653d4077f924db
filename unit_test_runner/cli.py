import asyncio
import sys

from .browser import open_session
from .harness import Outcome, run_test, say


async def run(url):
    async with open_session() as session:
        return await run_test(url, session)


def main(argv=None):
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 1:
        say("Expected a target URL parameter.")
        return Outcome.USAGE_ERROR.exit_code

    outcome = asyncio.run(run(args[0]))
    return outcome.exit_code
