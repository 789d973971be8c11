"""End-to-end tests for registry generation."""

from datetime import datetime, timezone

import pytest

from tlang_registry.config import CATEGORY_COLORS, Config, OutputConfig, SourceConfig
from tlang_registry.output import Registry
from tlang_registry.pipeline import build_registry, run_pipeline


def _config(source_dir, output, fmt="typescript"):
    return Config(
        source=SourceConfig(source_dir=source_dir),
        output=OutputConfig(path=output, format=fmt),
    )


def _without_timestamp(text: str) -> str:
    return "\n".join(line for line in text.splitlines() if "Generated at:" not in line)


class TestBuildRegistry:
    @pytest.fixture
    def built(self, fixture_src, tmp_path, fixed_clock):
        return build_registry(_config(fixture_src, tmp_path / "registry.ts"), clock=fixed_clock)

    def test_ids_in_discovery_order(self, built):
        _, registry, _ = built
        assert list(registry.nodes) == [
            "Numbers.Add",
            "Numbers.Subtract",
            "Numbers.Times",
            "Strings.Concat",
            "Strings.Split",
            "Strings.Length",
            "Conditional.Echo",
            "Conditional.Pick",
            "Conditional.Either",
            "Custom.Identity",
            "Custom.Configure",
        ]

    def test_node_counts(self, built):
        manifest, _, counts = built
        assert manifest.namespace_count == 4
        assert counts == {"Numbers": 3, "Strings": 3, "Conditional": 3, "Custom": 2}

    def test_required_flag_law(self, built):
        _, registry, _ = built
        for entry in registry.nodes.values():
            assert all(p.required for p in entry.inputs)
            assert not any(p.required for p in entry.outputs)

    def test_numbers_add(self, built):
        _, registry, _ = built
        add = registry.get_node_by_id("Numbers.Add")
        assert add.color == CATEGORY_COLORS["Numbers"]
        assert [(p.id, p.type) for p in add.inputs] == [("a", "number"), ("b", "number")]
        assert [(p.id, p.type) for p in add.outputs] == [("out", "number")]

    def test_default_color_and_fallbacks(self, built):
        _, registry, _ = built
        identity = registry.get_node_by_id("Custom.Identity")
        assert identity.color == "#6b7280"
        length = registry.get_node_by_id("Strings.Length")
        assert length.description == "Length operation"
        assert registry.get_node_by_id("Numbers.Subtract") is not None

    def test_categories(self, built):
        _, registry, _ = built
        assert registry.get_all_categories() == ["Conditional", "Custom", "Numbers", "Strings"]


class TestRunPipeline:
    def test_writes_typescript(self, fixture_src, tmp_path, fixed_clock):
        output = tmp_path / "core" / "nodes" / "registry.ts"
        result = run_pipeline(_config(fixture_src, output), clock=fixed_clock)
        assert result.written == [output]
        text = output.read_text()
        assert "'Conditional.Echo': {" in text
        assert " * Generated at: 2025-01-15T12:00:00+00:00" in text

    def test_writes_json(self, fixture_src, tmp_path, fixed_clock):
        output = tmp_path / "registry.json"
        run_pipeline(_config(fixture_src, output, fmt="json"), clock=fixed_clock)
        registry = Registry.load_json(output)
        assert registry.node_count == 11

    def test_writes_both(self, fixture_src, tmp_path, fixed_clock):
        output = tmp_path / "registry.ts"
        result = run_pipeline(_config(fixture_src, output, fmt="both"), clock=fixed_clock)
        assert result.written == [output, tmp_path / "registry.json"]
        assert (tmp_path / "registry.json").exists()

    def test_idempotent(self, fixture_src, tmp_path, fixed_clock):
        first = tmp_path / "a.ts"
        second = tmp_path / "b.ts"
        run_pipeline(_config(fixture_src, first), clock=fixed_clock)
        run_pipeline(_config(fixture_src, second), clock=fixed_clock)
        assert first.read_bytes() == second.read_bytes()

    def test_only_timestamp_differs(self, fixture_src, tmp_path, fixed_clock):
        first = tmp_path / "a.ts"
        second = tmp_path / "b.ts"
        run_pipeline(_config(fixture_src, first), clock=fixed_clock)
        run_pipeline(
            _config(fixture_src, second),
            clock=lambda: datetime(2030, 6, 1, tzinfo=timezone.utc),
        )
        assert first.read_text() != second.read_text()
        assert _without_timestamp(first.read_text()) == _without_timestamp(second.read_text())

    def test_namespace_callback(self, fixture_src, tmp_path, fixed_clock):
        seen = []
        run_pipeline(
            _config(fixture_src, tmp_path / "registry.ts"),
            clock=fixed_clock,
            on_namespace=lambda ns, path, count: seen.append((ns, path.name, count)),
        )
        assert seen == [
            ("Numbers", "numbers.ts", 3),
            ("Strings", "strings.ts", 3),
            ("Conditional", "conditional.ts", 3),
            ("Custom", "custom.ts", 2),
        ]


class TestPipelineErrors:
    def test_missing_namespace_file(self, write_tree, tmp_path):
        src = write_tree({
            "index.ts": "export * as Numbers from './numbers'\nexport * as Ghost from './ghost'\n",
            "numbers.ts": "interface AddNode { inputs: { a: number } }\n",
        })
        output = tmp_path / "out" / "registry.ts"
        with pytest.raises(FileNotFoundError, match="ghost.ts"):
            run_pipeline(_config(src, output))
        assert not output.exists()

    def test_missing_manifest(self, tmp_path):
        output = tmp_path / "registry.ts"
        with pytest.raises(FileNotFoundError):
            run_pipeline(_config(tmp_path / "nowhere", output))
        assert not output.exists()

    def test_duplicate_ids(self, write_tree, tmp_path):
        src = write_tree({
            "index.ts": "export * as Numbers from './numbers'\n",
            "numbers.ts": (
                "interface FooNode {}\n"
                "interface BarNode {}\n"
                "export type Foo = BarNode\n"
            ),
        })
        output = tmp_path / "registry.ts"
        with pytest.raises(ValueError, match="Numbers.Foo"):
            run_pipeline(_config(src, output))
        assert not output.exists()

    def test_failed_run_keeps_previous_artifact(self, write_tree, tmp_path):
        src = write_tree({"index.ts": "export * as Ghost from './ghost'\n"})
        output = tmp_path / "registry.ts"
        output.write_text("previous")
        with pytest.raises(FileNotFoundError):
            run_pipeline(_config(src, output))
        assert output.read_text() == "previous"

    def test_unknown_format(self, tmp_path):
        with pytest.raises(ValueError, match="Unknown output format"):
            OutputConfig(path=tmp_path / "registry.ts", format="yaml")
