"""Recording fakes for the panel's collaborators."""

from dataclasses import dataclass, field

from checklist.notifications import Toast, ToastStatus


@dataclass(slots=True)
class RecordingNotifier:
    """Notifier that keeps every toast for assertions."""

    toasts: list[Toast] = field(default_factory=list)

    def notify(self, toast: Toast) -> None:
        self.toasts.append(toast)

    def statuses(self) -> list[ToastStatus]:
        return [t.status for t in self.toasts]


@dataclass(slots=True)
class ChangeCounter:
    """Change listener that counts invocations."""

    calls: int = 0

    def __call__(self) -> None:
        self.calls += 1
