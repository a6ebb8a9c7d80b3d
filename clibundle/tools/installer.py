# -*- coding: utf-8 -*-
"""Install, update and uninstall tool packages via the package manager."""

from __future__ import annotations

import logging
import shutil
import subprocess
from typing import Callable, List

from ..constant import PACKAGE_MANAGER

logger = logging.getLogger(__name__)


class PackageManager:
    """Thin wrapper over ``npm <command> -g <package>``.

    Every operation returns ``True`` on success and ``False`` otherwise;
    failures are logged, never raised.
    """

    def __init__(
        self,
        manager: str = PACKAGE_MANAGER,
        runner: Callable[..., subprocess.CompletedProcess] = subprocess.run,
    ) -> None:
        self.manager = manager
        self._runner = runner

    def install(self, package_name: str) -> bool:
        return self._run("install", package_name, "installed")

    def update(self, package_name: str) -> bool:
        # A global install of an already installed package upgrades it.
        return self._run("install", package_name, "updated")

    def uninstall(self, package_name: str) -> bool:
        return self._run("uninstall", package_name, "uninstalled")

    def build_command(self, command: str, package_name: str) -> List[str]:
        executable = shutil.which(self.manager) or self.manager
        return [executable, command, "-g", package_name, "--loglevel=error"]

    def _run(self, command: str, package_name: str, verb: str) -> bool:
        cmd = self.build_command(command, package_name)
        logger.debug("Running: %s", " ".join(cmd))
        try:
            proc = self._runner(
                cmd,
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError as e:
            logger.error("%s %s failed: %s", self.manager, command, e)
            return False

        if proc.returncode != 0:
            logger.error(
                "%s %s %s failed (exit %s): %s",
                self.manager,
                command,
                package_name,
                proc.returncode,
                (proc.stderr or proc.stdout or "").strip(),
            )
            return False

        logger.info("%s %s successfully", package_name, verb)
        return True
