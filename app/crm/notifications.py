from flask import flash


class FlashNotifier:
    """Routes form notifications into Flask's flashed-message queue."""

    def notify_success(self, text: str) -> None:
        flash(text, "success")

    def notify_error(self, text: str) -> None:
        flash(text, "danger")
