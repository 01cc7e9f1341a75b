"""
    Interactive shell over an in-memory renderer.

    Each line is handed to ``CommandProcessor``; the renderer's element
    counts are shown after every command that changed them.
"""
import logging
import sys

from ..core import ReconciliationEngine
from ..memory_renderer import InMemoryRenderer
from .command_processor import CommandProcessor

PROMPT = "graph> "


def run(stdin=sys.stdin, stdout=sys.stdout) -> int:
    renderer = InMemoryRenderer()
    engine = ReconciliationEngine(renderer)
    engine.start()
    processor = CommandProcessor(engine)

    stdout.write(f"{renderer!r}\nType 'help' for usage, 'quit' to exit.\n")
    while True:
        stdout.write(PROMPT)
        stdout.flush()
        line = stdin.readline()
        if not line or line.strip() in ("quit", "exit"):
            break
        if not line.strip():
            continue
        result = processor.process(line)
        stdout.write(result.message + "\n")
        if result.data.get("diff"):
            stdout.write(f"{renderer!r}\n")
    return 0


def main() -> int:
    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return run()


if __name__ == '__main__':
    sys.exit(main())
