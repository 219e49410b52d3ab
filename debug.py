# debug.py
from __future__ import annotations
import logging
from typing import Dict

COMPONENTS = (
    "plugboard",
    "rotor",
    "reflector",
    "stepping",
    "encipher",
    "console",
)


class Debug:
    _root_configured: bool = False          # class-level guard

    # toggles live on the class so one switch reaches every module's instance
    components: Dict[str, bool] = {c: False for c in COMPONENTS}
    enabled: bool = True                    # global switch

    def __init__(self, *, log_to: str | None = None) -> None:
        """
        The first instance configures the root logger; later instances
        share it. `log_to` only has an effect on that first call.
        """
        if not Debug._root_configured:
            Debug.configure(log_to=log_to)

        self.logger = logging.getLogger("ENIGMA")

    @classmethod
    def configure(cls, *, log_to: str | None = None, level: int = logging.DEBUG) -> None:
        """(Re)install the root handlers, optionally mirroring to a file."""
        handlers: list[logging.Handler] = [logging.StreamHandler()]
        if log_to:
            handlers.append(logging.FileHandler(log_to, encoding="utf-8"))

        logging.basicConfig(
            level=level,
            format="[%(asctime)s] [%(levelname)s] [%(name)s]: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
            handlers=handlers,
            force=cls._root_configured,
        )
        cls._root_configured = True

    # ── logging API ──────────────────────────────────────────────
    def log(self, component: str, message: str) -> None:
        if Debug.enabled and Debug.components.get(component, False):
            self.logger.debug("[%s] %s", component.upper(), message)

    def warn(self, component: str, message: str) -> None:
        """Warnings ignore the component toggles."""
        self.logger.warning("[%s] %s", component.upper(), message)

    # ── component toggles ────────────────────────────────────────
    def enable(self, *components: str) -> None:
        for c in components:
            self._require(c)
            Debug.components[c] = True

    def disable(self, *components: str) -> None:
        for c in components:
            self._require(c)
            Debug.components[c] = False

    def toggle_global(self, state: bool) -> None:
        """Switch every component on/off at once."""
        Debug.enabled = state

    def status(self) -> Dict[str, bool]:
        """Return a *copy* of the current component map."""
        return Debug.components.copy()

    # ── helpers ──────────────────────────────────────────────────
    def _require(self, component: str) -> None:
        if component not in Debug.components:
            raise ValueError(f"No such component: {component!r}")

    def __repr__(self) -> str:
        active = [k for k, v in Debug.components.items() if v]
        return f"<Debug enabled={Debug.enabled} active={active}>"
