"""Interactive applications."""

from todo_panels.cli.studio.session import Session, run_session

__all__ = ["Session", "run_session"]
