"""WiFi wrappers around `netsh wlan`.

Connecting checks the saved profiles first and never retries.
"""

import re
from typing import Any

from setupctl.models.outcome import CommandOutcome, ErrorKind, Outcome
from setupctl.utils.shell import CommandResult
from setupctl.wrappers.base import CommandWrapper, InvalidInputError

_PROFILE_LINE = re.compile(r"^\s*(?:All|Current) User Profile\s*:\s*(?P<name>.*?)\s*$")

ADAPTER_HINTS = [
    "Check the adapter status with 'netsh wlan show interfaces'.",
    "Make sure WiFi is turned on and the adapter is enabled.",
]


def parse_profiles(output: str) -> list[str]:
    """Extract saved profile names from `netsh wlan show profiles` output.

    Args:
        output: Raw netsh output.

    Returns:
        Profile names in the order netsh lists them.
    """
    profiles: list[str] = []
    for line in output.splitlines():
        match = _PROFILE_LINE.match(line)
        if match and match.group("name"):
            profiles.append(match.group("name"))
    return profiles


class WifiWrapper(CommandWrapper):
    """Common failure hints for netsh wlan commands."""

    def failure_hints(self, result: CommandResult) -> list[str]:
        text = result.error_text.lower()
        hints = list(ADAPTER_HINTS)
        if "location" in text and "permission" in text:
            hints.append("Allow location access for desktop apps in Windows privacy settings.")
        if "no such wireless interface" in text:
            hints.append("List interface names with 'netsh wlan show interfaces'.")
        return hints


class WifiProfiles(WifiWrapper):
    """netsh wlan show profiles."""

    name = "wifi profiles"

    def build_args(self) -> list[str]:
        return ["netsh", "wlan", "show", "profiles"]

    def success_message(self, result: CommandResult) -> str:
        profiles = parse_profiles(result.stdout)
        return f"{len(profiles)} saved profile(s)"


class WifiConnect(WifiWrapper):
    """netsh wlan connect name=<profile> [interface=<name>].

    The saved profiles are listed first; an unknown name fails without a
    connect attempt.
    """

    name = "wifi connect"

    def __init__(self, profile: str, interface: str | None = None, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.profile = profile.strip()
        self.interface = interface

    def validate(self) -> None:
        if not self.profile:
            raise InvalidInputError("Network name cannot be empty")

    def build_args(self) -> list[str]:
        args = ["netsh", "wlan", "connect", f"name={self.profile}"]
        if self.interface:
            args.append(f"interface={self.interface}")
        return args

    def run(self) -> CommandOutcome:
        rejected = self.check()
        if rejected is not None:
            return rejected

        # Listing is read-only, so it runs even in dry-run mode
        listing = WifiProfiles(timeout=self._timeout, cwd=self._cwd).run()
        if listing.failed:
            return listing

        available = parse_profiles(listing.output)
        if self.profile not in available:
            listed = ", ".join(available) if available else "(none)"
            return CommandOutcome(
                command=self.name,
                outcome=Outcome.FAILURE,
                message=(
                    f"No saved WiFi profile named '{self.profile}'. "
                    f"Available profiles: {listed}"
                ),
                error_kind=ErrorKind.INVALID_INPUT,
                hints=("Connect once through the Windows network menu to save a profile.",),
                args=tuple(listing.args),
            )

        return super().run()

    def success_message(self, result: CommandResult) -> str:
        return f"Connection request sent for '{self.profile}'"

    def failure_hints(self, result: CommandResult) -> list[str]:
        hints = super().failure_hints(result)
        hints.append("If the network password changed, forget and re-save the profile.")
        return hints


class WifiDisconnect(WifiWrapper):
    """netsh wlan disconnect [interface=<name>]."""

    name = "wifi disconnect"

    def __init__(self, interface: str | None = None, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.interface = interface

    def build_args(self) -> list[str]:
        args = ["netsh", "wlan", "disconnect"]
        if self.interface:
            args.append(f"interface={self.interface}")
        return args

    def success_message(self, result: CommandResult) -> str:
        return "Disconnected"


class WifiStatus(WifiWrapper):
    """netsh wlan show interfaces."""

    name = "wifi status"

    def build_args(self) -> list[str]:
        return ["netsh", "wlan", "show", "interfaces"]

    def success_message(self, result: CommandResult) -> str:
        return "Interface status"
