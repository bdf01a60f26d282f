from __future__ import annotations

"""
Main Entry Point and Global Supervisor.

Routes execution to the CLI controller and installs a last-resort exception
hook so unexpected crashes are logged with their stack trace before exiting.
"""

import logging
import sys
import traceback
from typing import Any

# -----------------------------------------------------------------------------
# GLOBAL SUPERVISOR (EXCEPTION HANDLING)
# -----------------------------------------------------------------------------

def global_exception_handler(exctype: type[BaseException], value: BaseException, tb: Any) -> None:
    """
    Log an unhandled exception and print its trace to stderr.

    Args:
        exctype: Exception class.
        value: Exception instance.
        tb: Traceback object.
    """
    stack_trace = "".join(traceback.format_exception(exctype, value, tb))

    logger = logging.getLogger("openapi_map.supervisor")
    logger.critical(f"FATAL EXCEPTION DETECTED: {value}")

    print("\n" + "=" * 80, file=sys.stderr)
    print("CRITICAL ERROR (OPENAPI-MAP)", file=sys.stderr)
    print("=" * 80, file=sys.stderr)
    print(stack_trace, file=sys.stderr)

# -----------------------------------------------------------------------------
# EXECUTION ROUTING
# -----------------------------------------------------------------------------

def main() -> int:
    """
    Run the command-line interface.

    Returns:
        int: Process exit code.
    """
    sys.excepthook = global_exception_handler
    try:
        from openapi_map.interface.cli.app import main as cli_main
        return cli_main()
    except Exception as e:
        global_exception_handler(type(e), e, e.__traceback__)
        return 1


if __name__ == "__main__":
    sys.exit(main())
