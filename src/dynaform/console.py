"""Terminal presenter: renders a fetched form, prompts for fields, submits."""

import getpass
import sys
from typing import Callable

from returns.pipeline import is_successful

from .blueprint.loader import BlueprintLoader
from .clients.form import FormClient
from .core.config import Settings, get_settings
from .core.errors import ConfigFetchError, ConfigurationError
from .core.logging_config import configure_logging, get_logger
from .core.container import create_container
from .monitoring.metrics import metrics_collector
from .pipeline.outcomes import Outcome, ValidationFailed
from .render.descriptors import ElementDescriptor
from .session import FormSession

logger = get_logger(__name__)

YES = {"y", "yes", "1", "true", "x"}
NO = {"n", "no", "0", "false"}
CLEAR = "-"
METRICS_FLAG = "--metrics"


class ConsolePresenter:
    """Shows outcomes as terminal 'alerts'."""

    def __init__(self, out: Callable[[str], None] = print) -> None:
        self.out = out

    def show_outcome(self, outcome: Outcome) -> None:
        self.out(f"\n[{outcome.title}] {outcome.message}")
        if isinstance(outcome, ValidationFailed):
            for name, message in outcome.errors.items():
                self.out(f"  - {name}: {message}")

    def dismiss_focus(self) -> None:
        pass


class ConsoleForm:
    """Walks the render tree and asks for each field in turn."""

    def __init__(
        self,
        session: FormSession,
        input_fn: Callable[[str], str] = input,
        secret_fn: Callable[[str], str] = getpass.getpass,
        out: Callable[[str], None] = print,
    ) -> None:
        self.session = session
        self.input_fn = input_fn
        self.secret_fn = secret_fn
        self.out = out

    def run(self) -> bool:
        """
        Fill in and submit the form until it is accepted.

        Returns:
            True once submitted, False when the form has no submit element
        """
        while True:
            submitted = None
            for block in self.session.render():
                for descriptor in block.iter_elements():
                    if descriptor.kind == "submit":
                        submitted = self._submit(descriptor)
                        break
                    self._show(descriptor)
                if submitted is not None:
                    break

            if submitted is None:
                self.out("Form has no submit button.")
                return False
            if submitted:
                return True

    def _show(self, descriptor: ElementDescriptor) -> None:
        if descriptor.kind == "heading":
            self.out(f"\n== {descriptor.label} ==")
        elif descriptor.kind == "paragraph":
            self.out(descriptor.label)
        elif descriptor.kind in ("input", "password"):
            self._ask_text(descriptor)
        elif descriptor.kind == "checkbox":
            self._ask_checkbox(descriptor)

    def _ask_text(self, descriptor: ElementDescriptor) -> None:
        if descriptor.error:
            self.out(f"  ! {descriptor.error}")
        marker = "*" if descriptor.required else ""
        hint = f" ({descriptor.help})" if descriptor.help else ""
        current = ""
        if descriptor.value:
            shown = "set" if descriptor.masked else descriptor.value
            current = f" [{shown}; Enter keeps, {CLEAR} clears]"
        prompt = f"{descriptor.label}{marker}{hint}{current}: "
        answer = self.secret_fn(prompt) if descriptor.masked else self.input_fn(prompt)

        if answer == CLEAR:
            self.session.set_value(descriptor.name, "")
        elif answer:
            self.session.set_value(descriptor.name, answer)

    def _ask_checkbox(self, descriptor: ElementDescriptor) -> None:
        if descriptor.error:
            self.out(f"  ! {descriptor.error}")
        current = "y" if descriptor.value else "n"
        while True:
            answer = self.input_fn(f"[{'x' if descriptor.value else ' '}] {descriptor.label} (y/n) [{current}]: ")
            answer = answer.strip().lower()
            if not answer:
                return
            if answer in YES or answer in NO:
                if (answer in YES) != bool(descriptor.value):
                    self.session.toggle(descriptor.name)
                return
            self.out("Please answer y or n.")

    def _submit(self, descriptor: ElementDescriptor) -> bool:
        self.input_fn(f"Press Enter to {descriptor.label or 'submit'}... ")
        return is_successful(self.session.submit())


def run(settings: Settings) -> int:
    """Fetch the blueprint, run the form in the terminal and return an exit code."""
    configure_logging(settings.log_level, settings.json_logs)
    container = create_container(settings)
    loader = container.get(BlueprintLoader)
    client = container.get(FormClient)

    try:
        session = FormSession.load(loader, client, ConsolePresenter())
        return 0 if ConsoleForm(session).run() else 1
    except ConfigFetchError as e:
        print(f"Could not load form: {e}", file=sys.stderr)
        return 1
    except ConfigurationError as e:
        print(f"Form definition is broken: {e}", file=sys.stderr)
        return 2
    finally:
        client.close()


def main() -> None:
    """CLI entry point: dynaform [URL] [--metrics]"""
    args = sys.argv[1:]
    show_metrics = METRICS_FLAG in args
    args = [arg for arg in args if arg != METRICS_FLAG]
    settings = get_settings()
    if args:
        settings = settings.model_copy(update={"config_url": args[0]})

    try:
        code = run(settings)
    except (KeyboardInterrupt, EOFError):
        print()
        code = 130

    if show_metrics:
        # Prometheus exposition text for this run
        sys.stdout.write(metrics_collector.get_metrics().decode("utf-8"))
    sys.exit(code)


if __name__ == "__main__":
    main()
