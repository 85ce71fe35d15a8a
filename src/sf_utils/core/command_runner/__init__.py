from sf_utils.core.command_runner.abc import CommandRunner
from sf_utils.core.command_runner.real import RealCommandRunner

__all__ = ["CommandRunner", "RealCommandRunner"]
