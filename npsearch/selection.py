# npsearch/selection.py

import enum
from typing import Sequence

from rich.console import Console
from rich.prompt import Prompt
from rich.text import Text

from npsearch.formatter import legend
from npsearch.models import Choice, PackageRecord

console = Console()


class Action(str, enum.Enum):
    OPEN_REGISTRY = "Open on npm in browser"
    OPEN_REPOSITORY = "Open repository in browser"
    OPEN_HOMEPAGE = "Open package homepage in browser"
    OPEN_SANDBOX = "Open in RunKit"
    INSTALL = "Install without saving"
    INSTALL_SAVE = "Install to dependencies"
    INSTALL_SAVE_DEV = "Install to devDependencies"


def _always(pkg: PackageRecord) -> bool:
    return True


# menu order; a choice whose condition fails is left out, not disabled
ACTION_MENU = (
    (_always, Action.OPEN_REGISTRY),
    (lambda pkg: bool(pkg.links.repository), Action.OPEN_REPOSITORY),
    (lambda pkg: bool(pkg.links.homepage), Action.OPEN_HOMEPAGE),
    (_always, Action.OPEN_SANDBOX),
    (_always, Action.INSTALL),
    (_always, Action.INSTALL_SAVE),
    (_always, Action.INSTALL_SAVE_DEV),
)


def available_actions(pkg: PackageRecord) -> list[Action]:
    return [action for allowed, action in ACTION_MENU if allowed(pkg)]


def action_choices(pkg: PackageRecord) -> list[Choice]:
    return [Choice(label=a.value, value=a) for a in available_actions(pkg)]


def choose(message, choices: Sequence[Choice]):
    """
    Show a numbered list followed by a separator and return the value of the
    picked entry. Prompt.ask re-asks until one of the listed numbers is given.
    """
    console.print(message)
    width = len(str(len(choices)))
    for n, choice in enumerate(choices, 1):
        console.print(Text.assemble((f"{n:>{width}}) ", "cyan"), choice.label))
    console.rule(style="dim")
    answer = Prompt.ask(
        "Select",
        choices=[str(n) for n in range(1, len(choices) + 1)],
        show_choices=False,
        console=console,
    )
    return choices[int(answer) - 1].value


def pick_package(choices: Sequence[Choice]) -> PackageRecord:
    header = Text.assemble("Here is what we found:\n", legend())
    return choose(header, choices)


def pick_action(pkg: PackageRecord) -> Action:
    return choose("What do you want to do with this module?", action_choices(pkg))
