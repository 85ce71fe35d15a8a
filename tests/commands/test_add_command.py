"""Tests for the add-sf-utils command driven through click prompts."""

from pathlib import Path

from click.testing import CliRunner

from sf_utils.cli.cli import cli
from sf_utils.core.catalog import Catalog, UtilityDescriptor
from sf_utils.core.context import AppContext
from sf_utils.core.prompter.real import ClickPrompter
from tests.fakes.command_runner import FakeCommandRunner
from tests.fakes.git import FakeGit

REPO_URL = "git@example.com:boilerplates/utility-library.git"

CATALOG = Catalog(
    [
        UtilityDescriptor(
            id="socket",
            name="Socket Utility (sf-socket-2024)",
            branch_ref="feature/x",
            source_url=REPO_URL,
            dest_folder="sf-socketio",
            dependencies=("uuid@8.3.2",),
            dev_dependencies=("@types/uuid@8.3.4",),
        ),
        UtilityDescriptor(
            id="strip",
            name="Strip Utility (sf-strip-2024)",
            branch_ref="sf-strip-2024",
            source_url="",
            dest_folder="sf-strip",
        ),
    ]
)


def _build_context(
    tmp_path: Path, runner: FakeCommandRunner | None = None
) -> tuple[AppContext, FakeGit]:
    project = tmp_path / "project"
    project.mkdir()
    git = FakeGit(
        branches={
            (REPO_URL, "feature/x"): {
                "index.ts": "export {};",
                "package.json": "{}",
                "yarn.lock": "",
            }
        }
    )
    ctx = AppContext.for_test(
        git=git,
        command_runner=runner,
        prompter=ClickPrompter(),
        catalog=CATALOG,
        cwd=project,
        scratch_root=tmp_path / "scratch",
    )
    return ctx, git


def test_add_with_yarn_exits_zero(tmp_path: Path) -> None:
    fake_runner = FakeCommandRunner()
    ctx, _git = _build_context(tmp_path, fake_runner)
    runner = CliRunner()

    result = runner.invoke(cli, [], obj=ctx, input="socket\nyarn\n", catch_exceptions=False)

    assert result.exit_code == 0, result.output
    assert "Which utility would you like to add?" in result.output
    assert "Socket Utility (sf-socket-2024)" in result.output
    assert "Install with Yarn" in result.output
    assert "Install with NPM" in result.output
    destination = ctx.cwd / "utilities" / "sf-socketio"
    assert (destination / "index.ts").exists()
    assert not (destination / "package.json").exists()
    assert not (destination / "yarn.lock").exists()
    assert [cmd for cmd, _cwd in fake_runner.run_calls] == [
        ["yarn", "add", "uuid@8.3.2"],
        ["yarn", "add", "--dev", "@types/uuid@8.3.4"],
    ]


def test_unknown_choice_is_reprompted(tmp_path: Path) -> None:
    ctx, _git = _build_context(tmp_path)
    runner = CliRunner()

    result = runner.invoke(cli, [], obj=ctx, input="sockets\nsocket\nnpm\n")

    assert result.exit_code == 0, result.output
    assert "is not one of" in result.output


def test_missing_source_exits_one(tmp_path: Path) -> None:
    ctx, git = _build_context(tmp_path)
    runner = CliRunner()

    result = runner.invoke(cli, [], obj=ctx, input="strip\n")

    assert result.exit_code == 1
    assert "Error: Repository URL is missing for Strip Utility (sf-strip-2024)" in result.output
    assert git.clone_calls == []
    assert not (ctx.cwd / "utilities").exists()


def test_declined_overwrite_exits_two(tmp_path: Path) -> None:
    ctx, git = _build_context(tmp_path)
    destination = ctx.cwd / "utilities" / "sf-socketio"
    destination.mkdir(parents=True)
    (destination / "mine.ts").write_text("local", encoding="utf-8")
    runner = CliRunner()

    result = runner.invoke(cli, [], obj=ctx, input="socket\nn\n")

    assert result.exit_code == 2
    assert "Do you want to delete the old version and add a new one?" in result.output
    assert [p.name for p in destination.iterdir()] == ["mine.ts"]
    assert git.clone_calls == []


def test_overwrite_defaults_to_no(tmp_path: Path) -> None:
    ctx, git = _build_context(tmp_path)
    (ctx.cwd / "utilities" / "sf-socketio").mkdir(parents=True)
    runner = CliRunner()

    result = runner.invoke(cli, [], obj=ctx, input="socket\n\n")

    assert result.exit_code == 2
    assert git.clone_calls == []


def test_confirmed_overwrite_replaces_copy(tmp_path: Path) -> None:
    ctx, _git = _build_context(tmp_path)
    destination = ctx.cwd / "utilities" / "sf-socketio"
    destination.mkdir(parents=True)
    (destination / "stale.ts").write_text("old", encoding="utf-8")
    runner = CliRunner()

    result = runner.invoke(cli, [], obj=ctx, input="socket\ny\nnpm\n")

    assert result.exit_code == 0, result.output
    assert sorted(p.name for p in destination.iterdir()) == ["index.ts"]


def test_end_of_input_at_selection_exits_one(tmp_path: Path) -> None:
    ctx, git = _build_context(tmp_path)
    runner = CliRunner()

    result = runner.invoke(cli, [], obj=ctx, input="")

    assert result.exit_code == 1
    assert "Prompt interrupted" in result.output
    assert git.clone_calls == []


def test_install_failure_still_exits_zero_with_warning(tmp_path: Path) -> None:
    ctx, _git = _build_context(tmp_path, FakeCommandRunner(failing_programs={"npm"}))
    runner = CliRunner()

    result = runner.invoke(cli, [], obj=ctx, input="socket\nnpm\n")

    assert result.exit_code == 0, result.output
    assert "Warning: Dependencies were not installed" in result.output
    assert (ctx.cwd / "utilities" / "sf-socketio" / "index.ts").exists()


def test_help_lists_exit_codes() -> None:
    runner = CliRunner()

    result = runner.invoke(cli, ["-h"])

    assert result.exit_code == 0
    assert "Add a Seaflux utility to the current project." in result.output
    assert "cancelled" in result.output
