"""Package entry point for ``python -m filler_analyzer``.

WHY: Users run the analyzer as ``python -m filler_analyzer talk.txt``
for CLI mode, or ``python -m filler_analyzer --serve`` for the HTTP API.

HOW: Checks sys.argv for the ``--serve`` flag. If present, starts the
API server. Otherwise, delegates to the CLI's main() function.

RULES:
- ``--serve`` starts the FastAPI app with uvicorn
- Without ``--serve``, falls through to the CLI
"""

import sys

if __name__ == "__main__":
    if "--serve" in sys.argv:
        from filler_analyzer.server.app import run_api
        run_api()
    else:
        from filler_analyzer.cli import main
        main()
