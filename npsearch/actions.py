# npsearch/actions.py

import logging
import subprocess
import webbrowser
from dataclasses import dataclass

from rich.console import Console

from npsearch.models import PackageRecord
from npsearch.selection import Action
from npsearch.utils.errors import InstallError
from npsearch.utils.osdetect import npm_executable

logger = logging.getLogger(__name__)
console = Console()

REGISTRY_URL = "https://www.npmjs.com/package/{name}"
SANDBOX_URL = "https://runkit.com/npm/{name}"


@dataclass(frozen=True)
class OpenUrl:
    url: str


@dataclass(frozen=True)
class Install:
    name: str
    save: bool = False
    save_dev: bool = False


INSTALL_FLAGS = {
    Action.INSTALL: (False, False),
    Action.INSTALL_SAVE: (True, False),
    Action.INSTALL_SAVE_DEV: (False, True),
}


def dispatch(
    pkg: PackageRecord,
    action: Action,
    sandbox_url: str = SANDBOX_URL,
    registry_url: str = REGISTRY_URL,
):
    """
    Map an action picked for `pkg` to the effect that carries it out.
    Repository and homepage presence was settled when the menu was built; the
    registry page is always offered, so a missing npm link falls back to `registry_url`.
    """
    if action is Action.OPEN_REGISTRY:
        return OpenUrl(pkg.links.npm or registry_url.format(name=pkg.name))
    if action is Action.OPEN_REPOSITORY:
        return OpenUrl(pkg.links.repository)
    if action is Action.OPEN_HOMEPAGE:
        return OpenUrl(pkg.links.homepage)
    if action is Action.OPEN_SANDBOX:
        return OpenUrl(sandbox_url.format(name=pkg.name))
    save, save_dev = INSTALL_FLAGS[action]
    return Install(pkg.name, save=save, save_dev=save_dev)


def open_url(url: str):
    logger.debug("Opening %s", url)
    webbrowser.open(url)


def install_cmd(name: str, save: bool = False, save_dev: bool = False, npm=None) -> list[str]:
    if save:
        flag = "--save"
    elif save_dev:
        flag = "--save-dev"
    else:
        flag = "--no-save"
    return [npm or npm_executable(), "install", name, flag]


def install(name: str, save: bool = False, save_dev: bool = False, npm=None) -> bool:
    cmd = install_cmd(name, save=save, save_dev=save_dev, npm=npm)
    try:
        subprocess.check_call(cmd)
        return True
    except (subprocess.CalledProcessError, OSError) as e:
        logger.debug("Install failed %s → %s", cmd, e)
        return False


def perform(effect, npm=None):
    if isinstance(effect, OpenUrl):
        open_url(effect.url)
        return

    console.print(f"[cyan]Installing {effect.name}...[/cyan]")
    if not install(effect.name, save=effect.save, save_dev=effect.save_dev, npm=npm):
        raise InstallError()
    console.print(
        f"[cyan underline]Package {effect.name} installed successfully![/cyan underline]"
    )
