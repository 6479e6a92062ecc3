"""Session protocol over injected I/O."""

from radixcheck.session.options import DEFAULT_SENTINEL, SessionMode, SessionOptions
from radixcheck.session.session import MessageSink, Session, SessionResult, SessionState, run_session

__all__ = [
    "DEFAULT_SENTINEL",
    "MessageSink",
    "Session",
    "SessionMode",
    "SessionOptions",
    "SessionResult",
    "SessionState",
    "run_session",
]
