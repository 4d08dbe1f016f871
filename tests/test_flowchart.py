"""Tests for the flowchart diagram aggregate."""

import pytest
from mermaidkit.basediagram import BaseDiagram, Theme
from mermaidkit.flowchart import (
    Class,
    CurveStyle,
    Flowchart,
    FlowchartConfigurationProperties,
    FlowchartDirection,
    Link,
    LinkArrowType,
    LinkShape,
    Node,
    NodeShape,
    NodeStyle,
    Subgraph,
)


class TestNewFlowchart:
    def test_defaults(self, flowchart):
        assert flowchart.base == BaseDiagram(FlowchartConfigurationProperties())
        assert flowchart.direction == FlowchartDirection.TOP_TO_BOTTOM
        assert flowchart.curve_style == CurveStyle.NONE
        assert flowchart.classes == []
        assert flowchart.nodes == []
        assert flowchart.subgraphs == []
        assert flowchart.links == []


class TestFlowchartRender:
    def test_empty_flowchart(self, flowchart):
        assert flowchart.render() == "flowchart TB\n"

    def test_flowchart_with_class(self, flowchart):
        flowchart.add_class("myClass")
        assert "flowchart TB" in flowchart.render()

    def test_flowchart_with_subgraph(self, flowchart):
        flowchart.add_subgraph("My Subgraph")
        output = flowchart.render()
        assert "flowchart TB" in output
        assert "subgraph 0 [My Subgraph]" in output

    def test_multiple_elements(self, flowchart):
        flowchart.add_class("myClass")
        node1 = flowchart.add_node("My Node 1")
        node2 = flowchart.add_node("My Node 2")
        flowchart.add_subgraph("My Subgraph")
        flowchart.add_link(node1, node2)

        assert flowchart.render() == (
            "flowchart TB\n"
            "    classDef myClass\n"
            '    0@{ shape: rect, label: "My Node 1"}\n'
            '    1@{ shape: rect, label: "My Node 2"}\n'
            "    subgraph 2 [My Subgraph]\n"
            "    end\n"
            "    0 --> 1\n"
        )

    def test_render_is_idempotent(self, flowchart):
        node1 = flowchart.add_node("A")
        node2 = flowchart.add_node("B")
        flowchart.add_link(node1, node2).set_text("go")
        flowchart.base.set_title("Title")
        first = flowchart.render()
        assert flowchart.render() == first
        assert str(flowchart) == first

    def test_insertion_order(self, flowchart):
        for text in ["C", "A", "B"]:
            flowchart.add_node(text)
        output = flowchart.render()
        assert output.index('label: "C"') < output.index('label: "A"') < output.index('label: "B"')

    def test_sections_order(self, flowchart):
        node = flowchart.add_node("N")
        flowchart.add_link(node, node)
        flowchart.add_subgraph("S")
        flowchart.add_class("c")
        output = flowchart.render()
        assert output.index("classDef c") < output.index("0@{") < output.index("subgraph 1") < output.index("0 --> 0")

    @pytest.mark.parametrize(
        "direction, header",
        [
            (FlowchartDirection.TOP_TO_BOTTOM, "flowchart TB\n"),
            (FlowchartDirection.LEFT_RIGHT, "flowchart LR\n"),
            (FlowchartDirection.RIGHT_LEFT, "flowchart RL\n"),
            (FlowchartDirection.BOTTOM_UP, "flowchart BT\n"),
        ],
    )
    def test_direction_header(self, flowchart, direction, header):
        assert flowchart.set_direction(direction).render().startswith(header)

    def test_unknown_direction_renders_default(self, flowchart):
        flowchart.direction = "sideways"
        assert flowchart.render().startswith("flowchart TB\n")

    def test_curve_style_in_front_matter(self, flowchart):
        flowchart.set_curve_style(CurveStyle.STEP_AFTER)
        assert flowchart.curve_style == CurveStyle.STEP_AFTER
        assert flowchart.render() == "---\nconfig:\n  flowchart:\n    curve: stepAfter\n---\nflowchart TB\n"

    def test_curve_style_none_removes_setting(self, flowchart):
        flowchart.set_curve_style(CurveStyle.BASIS).set_curve_style(CurveStyle.NONE)
        assert flowchart.render() == "flowchart TB\n"

    def test_theme(self, flowchart):
        flowchart.base.set_theme(Theme.DARK)
        assert flowchart.render().startswith("---\nconfig:\n  theme: dark\n---\n")

    def test_render_to_file(self, flowchart, tmp_path):
        flowchart.add_node("A")
        path = tmp_path / "diagram.mmd"
        flowchart.render_to_file(path)
        assert path.read_text(encoding="UTF-8") == flowchart.render()

    def test_render_to_missing_directory_raises(self, flowchart, tmp_path):
        with pytest.raises(OSError):
            flowchart.render_to_file(tmp_path / "missing" / "diagram.mmd")


class TestFlowchartAdd:
    def test_add_node(self, flowchart):
        node = flowchart.add_node("Test Node")
        assert node == Node(id="0", text="Test Node", shape=NodeShape.PROCESS)
        assert flowchart.nodes == [node]
        assert flowchart.nodes[0] is node

    def test_add_link(self, flowchart):
        start = flowchart.add_node("Start")
        end = flowchart.add_node("End")
        link = flowchart.add_link(start, end)
        assert link == Link(
            from_=start,
            to=end,
            shape=LinkShape.OPEN,
            head=LinkArrowType.ARROW,
            tail=LinkArrowType.NONE,
            length=0,
        )
        assert flowchart.links == [link]

    def test_add_subgraph(self, flowchart):
        subgraph = flowchart.add_subgraph("Test Subgraph")
        assert subgraph.title == "Test Subgraph"
        assert len(flowchart.subgraphs) == 1
        second = flowchart.add_subgraph("Second Subgraph")
        assert int(second.id) > int(subgraph.id)

    def test_nodes_and_subgraphs_share_sequence(self, flowchart):
        assert flowchart.add_node("a").id == "0"
        assert flowchart.add_subgraph("s").id == "1"
        assert flowchart.add_node("b").id == "2"
        assert flowchart.subgraphs[0].add_subgraph("nested").id == "3"
        assert flowchart.add_node("c").id == "4"

    def test_add_class(self, flowchart):
        style_class = flowchart.add_class("TestClass")
        assert style_class.name == "TestClass"
        flowchart.add_class("SecondClass")
        assert [c.name for c in flowchart.classes] == ["TestClass", "SecondClass"]

    def test_link_to_foreign_node_is_not_validated(self, flowchart):
        other = Flowchart(id_generator=None)
        other.add_node("x")
        foreign = other.add_node("y")
        local = flowchart.add_node("z")
        flowchart.add_link(local, foreign)
        assert "    0 --> 1\n" in flowchart.render()
        assert 'label: "y"' not in flowchart.render()

    def test_chaining_returns_same_objects(self, flowchart):
        assert flowchart.set_direction(FlowchartDirection.LEFT_RIGHT) is flowchart
        assert flowchart.set_curve_style(CurveStyle.LINEAR) is flowchart
        node = flowchart.add_node("n")
        assert node.set_shape(NodeShape.DECISION).set_text("t") is node
        assert node.set_class(None) is node
        assert node.set_style(None) is node


class TestNode:
    def test_render(self):
        assert Node("3", "Hello").render() == '3@{ shape: rect, label: "Hello"}\n'

    def test_indent(self):
        assert Node("3", "Hello").render("\t") == '\t3@{ shape: rect, label: "Hello"}\n'

    def test_shape(self):
        node = Node("1", "Decide").set_shape(NodeShape.DECISION)
        assert node.render() == '1@{ shape: diamond, label: "Decide"}\n'

    def test_unknown_shape_renders_process(self):
        node = Node("1", "x").set_shape("blob")
        assert "shape: rect" in node.render()

    def test_quotes_escaped(self):
        assert 'label: "a #quot;b#quot;"' in Node("1", 'a "b"').render()

    def test_class_and_style(self):
        style_class = Class("warn", NodeStyle(fill="#f96"))
        node = Node("1", "x").set_class(style_class).set_style(NodeStyle().set_stroke("#333").set_stroke_width(2))
        assert node.render("  ") == (
            '  1@{ shape: rect, label: "x"}\n' "  class 1 warn\n" "  style 1 stroke:#333,stroke-width:2px\n"
        )


class TestStyles:
    def test_node_style_all_properties(self):
        style = (
            NodeStyle()
            .set_fill("#f9f")
            .set_stroke("#333")
            .set_stroke_width(4)
            .set_color("#fff")
            .set_stroke_dasharray("5 5")
        )
        assert style.render() == "fill:#f9f,stroke:#333,stroke-width:4px,color:#fff,stroke-dasharray:5 5"

    def test_empty_style(self):
        assert NodeStyle().render() == ""

    def test_class_render(self):
        assert Class("green", NodeStyle(fill="#9f6")).render("    ") == "    classDef green fill:#9f6\n"

    def test_class_chaining(self):
        style_class = Class("a")
        assert style_class.set_name("b").set_style(NodeStyle()) is style_class
        assert style_class.name == "b"


class TestSubgraph:
    def test_members_direction_nested_and_links(self, flowchart):
        a = flowchart.add_node("A")
        b = flowchart.add_node("B")
        outer = flowchart.add_subgraph("Outer").set_direction(FlowchartDirection.LEFT_RIGHT)
        outer.add_node(a)
        inner = outer.add_subgraph("Inner [x]")
        inner.add_node(b)
        outer.add_link(a, b).set_shape(LinkShape.DOTTED)

        assert outer.render("    ") == (
            "    subgraph 2 [Outer]\n"
            "        direction LR\n"
            "        0\n"
            '        subgraph 3 ["Inner [x]"]\n'
            "            1\n"
            "        end\n"
            "        0 -.-> 1\n"
            "    end\n"
        )

    def test_link_between_subgraphs(self, flowchart):
        first = flowchart.add_subgraph("one")
        second = flowchart.add_subgraph("two")
        flowchart.add_link(first, second)
        assert "    0 --> 1\n" in flowchart.render()

    def test_empty_title(self, flowchart):
        flowchart.add_subgraph("")
        assert "    subgraph 0\n    end\n" in flowchart.render()

    def test_standalone_subgraph_nested_ids_follow_own_id(self):
        subgraph = Subgraph("0", "outer")
        nested = subgraph.add_subgraph("inner")
        assert nested.id == "1"
        assert nested.add_subgraph("deeper").id == "2"

    def test_setters_chain(self, flowchart):
        subgraph = flowchart.add_subgraph("s")
        assert subgraph.set_title("t").set_direction(None) is subgraph
        assert subgraph.add_node(flowchart.add_node("n")) is subgraph
