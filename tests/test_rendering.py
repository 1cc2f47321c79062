"""Tests for template rendering and the render-commands use case."""

from __future__ import annotations

import pytest

from filelu_rclone.application.use_cases.render_commands import RenderCommandsUseCase
from filelu_rclone.domain.errors import CommandNotFoundError
from filelu_rclone.domain.models.command import CatalogSection, CommandTemplate
from filelu_rclone.domain.models.parameters import CommandParameters
from filelu_rclone.domain.rendering import (
    bind_paths,
    render_catalog,
    render_template,
    substitute_remote,
)


def _by_key(catalog, params):
    return {cmd.key: cmd for cmd in render_catalog(catalog, params)}


# ---------------------------------------------------------------------------
# Default scenarios
# ---------------------------------------------------------------------------


class TestDefaultCatalog:
    def test_order_and_titles(self, catalog, params):
        titles = [cmd.title for cmd in render_catalog(catalog, params)]
        assert titles == [
            "Rclone Config Command (Step 1)",
            "Get Account Storage Info",
            "Copy Local to FileLu",
            "Sync Local to Remote (One-way)",
            "Mount FileLu as Local Drive (Linux/Mac)",
            "List Remote Directory Contents",
        ]

    def test_default_commands(self, catalog, params):
        cmds = _by_key(catalog, params)
        assert cmds["config"].command == "rclone config"
        assert cmds["about"].command == "rclone about filelu:"
        assert cmds["copy"].command == "rclone copy /path/to/local/folder filelu:/backup/my-files"
        assert cmds["sync"].command == (
            "rclone sync /path/to/local/folder filelu:/backup/my-files --progress --dry-run"
        )
        assert cmds["mount"].command == "rclone mount filelu: /mnt/filelu --vfs-cache-mode full"
        assert cmds["list"].command == "rclone ls filelu:/backup/my-files"

    def test_sections(self, catalog, params):
        setup = render_catalog(catalog, params, CatalogSection.SETUP)
        examples = render_catalog(catalog, params, CatalogSection.EXAMPLES)
        assert [c.key for c in setup] == ["config"]
        assert [c.key for c in examples] == ["about", "copy", "sync", "mount", "list"]
        assert all(c.section == CatalogSection.EXAMPLES for c in examples)

    def test_empty_alias_is_accepted(self, catalog):
        cmds = _by_key(catalog, CommandParameters(remote_alias=""))
        assert cmds["about"].command == "rclone about :"
        assert cmds["copy"].command == "rclone copy /path/to/local/folder :/backup/my-files"


# ---------------------------------------------------------------------------
# Substitution rules
# ---------------------------------------------------------------------------


class TestSubstitution:
    @pytest.mark.parametrize("alias", ["filelu", "my-remote", "", "a b", "x:y", "$HOME"])
    def test_non_path_templates_only_replace_placeholder(self, catalog, alias):
        params = CommandParameters(remote_alias=alias)
        for _section, tpl in catalog.entries():
            if tpl.is_path_bearing:
                continue
            assert render_template(tpl, params) == tpl.pattern.replace("{remoteName}", alias)

    @pytest.mark.parametrize(
        "local, remote",
        [
            ("/home/me/My Documents", "/backup/two words"),
            ("/tmp/x; rm -rf ~", "/a & b | c"),
            ("$(whoami)/`id`", "'quoted' \"double\""),
            ("C:\\Users\\me\\1", "\\g<0>"),
        ],
    )
    def test_paths_are_inserted_verbatim(self, catalog, local, remote):
        params = CommandParameters(local_path=local, remote_path=remote)
        cmds = _by_key(catalog, params)
        assert cmds["copy"].command == f"rclone copy {local} filelu:{remote}"
        assert cmds["sync"].command == (
            f"rclone sync {local} filelu:{remote} --progress --dry-run"
        )
        assert cmds["list"].command == f"rclone ls filelu:{remote}"

    def test_every_placeholder_occurrence_is_replaced(self, params):
        tpl = CommandTemplate(
            key="check", title="Check", pattern="rclone check {remoteName}:a {remoteName}:b"
        )
        params.set_remote_alias("lu")
        assert render_template(tpl, params) == "rclone check lu:a lu:b"
        assert tpl.placeholder_count == 2

    def test_path_containing_placeholder_is_substituted_too(self, catalog):
        params = CommandParameters(remote_alias="lu", local_path="/data/{remoteName}")
        assert _by_key(catalog, params)["copy"].command == (
            "rclone copy /data/lu lu:/backup/my-files"
        )

    def test_path_slot_text_inside_a_path_is_not_reexpanded(self):
        bound = bind_paths("{localPath} -> {remotePath}", "{remotePath}", "/dst")
        assert bound == "{remotePath} -> /dst"

    def test_substitute_remote(self):
        assert substitute_remote("{remoteName}:{remoteName}", "r") == "r:r"


# ---------------------------------------------------------------------------
# Purity & recomputation
# ---------------------------------------------------------------------------


class TestPurity:
    def test_rendering_is_idempotent(self, catalog, params):
        first = render_catalog(catalog, params)
        second = render_catalog(catalog, params)
        assert first == second
        assert first is not second

    def test_catalog_is_not_mutated(self, catalog, params):
        before = [tpl.pattern for _s, tpl in catalog.entries()]
        params.set_remote_alias("other")
        render_catalog(catalog, params)
        assert [tpl.pattern for _s, tpl in catalog.entries()] == before

    def test_path_change_only_affects_path_bearing_templates(self, catalog, params):
        before = _by_key(catalog, params)
        params.set_local_path("/elsewhere")
        params.set_remote_path("/other")
        after = _by_key(catalog, params)
        changed = {key for key in before if before[key].command != after[key].command}
        assert changed == {"copy", "sync", "list"}

    def test_alias_change_affects_all_placeholder_templates(self, catalog, params):
        before = _by_key(catalog, params)
        params.set_remote_alias("backup")
        after = _by_key(catalog, params)
        changed = {key for key in before if before[key].command != after[key].command}
        assert changed == {"about", "copy", "sync", "mount", "list"}


# ---------------------------------------------------------------------------
# Use case
# ---------------------------------------------------------------------------


class TestRenderCommandsUseCase:
    def test_execute_matches_render_catalog(self, catalog, params):
        uc = RenderCommandsUseCase(catalog)
        assert uc.execute(params) == render_catalog(catalog, params)

    @pytest.mark.parametrize(
        "selector, key",
        [("1", "config"), ("3", "copy"), ("sync", "sync"), ("Get Account Storage Info", "about")],
    )
    def test_find(self, catalog, params, selector, key):
        assert RenderCommandsUseCase(catalog).find(selector, params).key == key

    @pytest.mark.parametrize("selector", ["0", "7", "nope", "copy local to filelu"])
    def test_find_unknown(self, catalog, params, selector):
        with pytest.raises(CommandNotFoundError):
            RenderCommandsUseCase(catalog).find(selector, params)
