"""Application context with dependency injection."""

from dataclasses import dataclass
from pathlib import Path

from jetpack_cli.core.config import CliConfig, load_config
from jetpack_cli.core.repo_discovery import resolve_monorepo_root
from jetpack_cli.core.user_feedback import InteractiveFeedback, UserFeedback
from jetpack_cli.ops.process import ProcessRunner
from jetpack_cli.ops.process_real import RealProcessRunner
from jetpack_cli.ops.prompter import ProjectPrompter
from jetpack_cli.ops.prompter_real import RealProjectPrompter


@dataclass(frozen=True)
class JetpackContext:
    """Immutable context holding all dependencies for jetpack-cli operations.

    Created at CLI entry point and threaded through the application.
    Frozen to prevent accidental modification at runtime.

    monorepo_root is None when the CLI runs outside a checkout and no root is
    configured; commands that need it check with Ensure.
    """

    process: ProcessRunner
    prompter: ProjectPrompter
    feedback: UserFeedback
    cwd: Path
    config: CliConfig
    config_path: Path | None
    monorepo_root: Path | None

    @property
    def projects_root(self) -> Path | None:
        if self.monorepo_root is None:
            return None
        return self.monorepo_root / self.config.projects_dir

    @staticmethod
    def for_test(
        process: ProcessRunner | None = None,
        prompter: ProjectPrompter | None = None,
        feedback: UserFeedback | None = None,
        cwd: Path | None = None,
        config: CliConfig | None = None,
        config_path: Path | None = None,
        monorepo_root: Path | None = None,
    ) -> "JetpackContext":
        """Create test context with optional pre-configured collaborators.

        Unspecified collaborators become in-memory fakes. cwd defaults to a
        sentinel path so tests never touch the real working directory.

        Example:
            >>> runner = FakeProcessRunner(exit_code=3)
            >>> ctx = JetpackContext.for_test(process=runner, monorepo_root=tmp_path)
        """
        from tests.fakes.process import FakeProcessRunner
        from tests.fakes.prompter import FakeProjectPrompter
        from tests.fakes.user_feedback import FakeUserFeedback

        return JetpackContext(
            process=process if process is not None else FakeProcessRunner(),
            prompter=prompter if prompter is not None else FakeProjectPrompter(),
            feedback=feedback if feedback is not None else FakeUserFeedback(),
            cwd=cwd if cwd is not None else Path("/test/default/cwd"),
            config=config if config is not None else CliConfig.defaults(),
            config_path=config_path,
            monorepo_root=monorepo_root,
        )


def create_context() -> JetpackContext:
    """Create production context with real implementations.

    Called once at CLI entry point. Loads config eagerly so a malformed file
    is reported before any command runs.
    """
    cwd = Path.cwd()
    config = load_config()
    return JetpackContext(
        process=RealProcessRunner(),
        prompter=RealProjectPrompter(),
        feedback=InteractiveFeedback(),
        cwd=cwd,
        config=config,
        config_path=None,
        monorepo_root=resolve_monorepo_root(config, cwd),
    )
