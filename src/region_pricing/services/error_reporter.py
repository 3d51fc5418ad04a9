"""
Error Reporter - records failures to the error log sink, best effort.
"""
import logging

logger = logging.getLogger(__name__)

OPEN = "Open"


class ErrorReporter:
    """
    Wraps a failure into a {message, action_name, status} record and writes it.

    A failing sink is logged and otherwise ignored so it never hides the
    error being reported.
    """

    def __init__(self, sink):
        self.sink = sink

    def report_error(self, message: str, action_name: str) -> bool:
        """Write one error record. Returns False if the sink write failed."""
        record = {"message": str(message), "action_name": action_name, "status": OPEN}
        try:
            self.sink.write(record)
            return True
        except Exception as e:
            logger.warning("Could not write error log for %s: %s", action_name, e)
            return False
