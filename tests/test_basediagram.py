"""Tests for basediagram.py - front-matter shell shared by all diagram kinds."""

import pytest
import yaml
from pydantic import ValidationError
from mermaidkit.basediagram import BaseDiagram, Look, Theme
from mermaidkit.block import BlockConfigurationProperties, BlockDiagram
from mermaidkit.flowchart import CurveStyle, Flowchart, FlowchartConfigurationProperties
from mermaidkit.state import StateConfigurationProperties, StateDiagram


class TestBaseDiagram:
    def test_no_configuration_returns_body_unchanged(self):
        base = BaseDiagram(FlowchartConfigurationProperties())
        body = "flowchart TB\n    0 --> 1\n"
        assert base.front_matter() == ""
        assert base.render(body) == body

    def test_title(self):
        base = BaseDiagram(BlockConfigurationProperties()).set_title("My Diagram")
        assert base.render("block-beta\n") == "---\ntitle: My Diagram\n---\nblock-beta\n"

    def test_theme_look_and_properties(self):
        base = BaseDiagram(FlowchartConfigurationProperties())
        base.set_title("My Diagram").set_theme(Theme.DARK).set_look(Look.HAND_DRAWN)
        base.config.curve = CurveStyle.BASIS
        base.config.node_spacing = 30

        expected = (
            "---\n"
            "title: My Diagram\n"
            "config:\n"
            "  theme: dark\n"
            "  look: handDrawn\n"
            "  flowchart:\n"
            "    nodeSpacing: 30\n"
            "    curve: basis\n"
            "---\n"
        )
        assert base.front_matter() == expected

    def test_body_is_verbatim(self):
        base = BaseDiagram(StateConfigurationProperties()).set_theme(Theme.FOREST)
        body = "stateDiagram-v2\n\n  weird   spacing\n"
        assert base.render(body).endswith(body)

    def test_special_characters_in_title_stay_valid_yaml(self):
        base = BaseDiagram(BlockConfigurationProperties()).set_title("Build: stage #1")
        front_matter = base.front_matter()
        loaded = yaml.safe_load(front_matter.strip("-\n"))
        assert loaded == {"title": "Build: stage #1"}

    def test_setters_chain(self):
        base = BaseDiagram(BlockConfigurationProperties())
        assert base.set_title("x") is base
        assert base.set_theme(Theme.BASE) is base
        assert base.set_look(Look.CLASSIC) is base

    def test_theme_from_string(self):
        base = BaseDiagram(BlockConfigurationProperties()).set_theme("neutral")
        assert base.theme == Theme.NEUTRAL


class TestConfigurationProperties:
    def test_only_set_properties_exported(self):
        props = StateConfigurationProperties(padding=8)
        assert props.to_dict() == {"padding": 8}

    def test_camel_case_aliases(self):
        props = FlowchartConfigurationProperties(html_labels=False, title_top_margin=5)
        assert props.to_dict() == {"titleTopMargin": 5, "htmlLabels": False}

    def test_populate_by_alias(self):
        props = BlockConfigurationProperties.model_validate({"useMaxWidth": True})
        assert props.use_max_width is True

    def test_unknown_property_rejected(self):
        with pytest.raises(ValidationError):
            FlowchartConfigurationProperties.model_validate({"nope": 1})

    def test_assignment_validated(self):
        props = FlowchartConfigurationProperties()
        with pytest.raises(ValidationError):
            props.curve = "wobbly"


class TestShellPerKind:
    @pytest.mark.parametrize(
        "diagram, header, section",
        [
            (Flowchart(), "flowchart TB", "flowchart"),
            (BlockDiagram(), "block-beta", "block"),
            (StateDiagram(), "stateDiagram-v2", "state"),
        ],
    )
    def test_front_matter_before_header(self, diagram, header, section):
        diagram.base.set_title("T")
        diagram.base.config.padding = 4
        output = diagram.render()
        assert output.startswith("---\ntitle: T\n")
        assert f"  {section}:\n    padding: 4\n---\n{header}\n" in output
