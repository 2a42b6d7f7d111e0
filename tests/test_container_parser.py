"""Tests for the ::: container parser."""

from anki_splitter.models import ContainerType, ToggleSubtype
from anki_splitter.parser.container import (
    extract_containers_from_html,
    is_link_container,
    is_todo_container,
    parse_containers,
)


class TestParseContainers:
    """Block detection and header parsing."""

    def test_simple_tip_block(self) -> None:
        blocks = parse_containers("::: tip 팁\n내용입니다.\n:::")

        assert len(blocks) == 1
        block = blocks[0]
        assert block.type is ContainerType.TIP
        assert block.title == "팁"
        assert block.content == "내용입니다."
        assert block.toggle_subtype is None
        assert (block.start_line, block.end_line) == (1, 3)

    def test_br_tags_are_line_breaks(self) -> None:
        blocks = parse_containers("::: warning<br>주의<br/>두 줄<BR />:::")

        assert len(blocks) == 1
        assert blocks[0].type is ContainerType.WARNING
        assert blocks[0].title is None
        assert blocks[0].content == "주의\n두 줄"

    def test_toggle_with_known_subtype(self) -> None:
        blocks = parse_containers("::: toggle todo 정리   필요\n할 일\n:::")

        assert blocks[0].type is ContainerType.TOGGLE
        assert blocks[0].toggle_subtype is ToggleSubtype.TODO
        assert blocks[0].title == "정리 필요"

    def test_toggle_with_subtype_only(self) -> None:
        blocks = parse_containers("::: toggle warning\n본문\n:::")

        assert blocks[0].toggle_subtype is ToggleSubtype.WARNING
        assert blocks[0].title is None

    def test_toggle_without_subtype_uses_rest_as_title(self) -> None:
        blocks = parse_containers("::: toggle 더 보기\n숨김 내용\n:::")

        assert blocks[0].toggle_subtype is None
        assert blocks[0].title == "더 보기"

    def test_unknown_type_is_plain_text(self) -> None:
        assert parse_containers("::: danger\n내용\n:::") == []
        assert parse_containers("::: tipster\n내용\n:::") == []

    def test_content_keeps_raw_lines(self) -> None:
        blocks = parse_containers("::: note\n  들여쓴 줄\n\n마지막\n:::")

        assert blocks[0].content == "  들여쓴 줄\n\n마지막"

    def test_raw_reconstructs_block(self) -> None:
        text = "::: toggle tip 요약\n내용\n:::"

        assert parse_containers(text)[0].raw == text


class TestNesting:
    """Stack behaviour with nested and unbalanced markers."""

    def test_nested_blocks_close_inner_first(self, nested_container_card) -> None:
        blocks = parse_containers(nested_container_card)

        assert [b.type for b in blocks] == [
            ContainerType.TIP,
            ContainerType.TOGGLE,
            ContainerType.TOGGLE,
        ]
        inner, outer, todo = blocks
        assert inner.title == "안쪽 팁"
        assert inner.content == "안쪽 내용"
        assert outer.toggle_subtype is ToggleSubtype.NOTE
        assert outer.content == "바깥 내용\n바깥 마무리"
        assert (outer.start_line, outer.end_line) == (2, 8)
        assert is_todo_container(todo)

    def test_end_marker_at_depth_zero_is_ignored(self) -> None:
        blocks = parse_containers(":::\n::: note\n내용\n:::\n:::")

        assert len(blocks) == 1
        assert blocks[0].content == "내용"

    def test_unterminated_block_is_dropped(self) -> None:
        assert parse_containers("::: tip 열림\n닫히지 않은 내용") == []

    def test_unterminated_outer_keeps_closed_inner(self) -> None:
        blocks = parse_containers("::: toggle 바깥\n::: tip\n안쪽\n:::\n남은 내용")

        assert len(blocks) == 1
        assert blocks[0].type is ContainerType.TIP

    def test_empty_input(self) -> None:
        assert parse_containers("") == []


class TestPredicates:
    """Todo and link helpers."""

    def test_todo_requires_toggle_type(self) -> None:
        tip, toggle = parse_containers("::: tip todo\nx\n:::\n::: toggle todo\ny\n:::")

        assert not is_todo_container(tip)
        assert is_todo_container(toggle)

    def test_link_container(self) -> None:
        link, note = parse_containers(
            "::: link 관련 카드\n[CPU|nid1726891647690]\n:::\n::: note\nx\n:::"
        )

        assert is_link_container(link)
        assert not is_link_container(note)


class TestExtractContainers:
    """Removal of blocks from the surrounding text."""

    def test_plain_text_excludes_blocks(self) -> None:
        text = "앞 문단\n::: tip 팁\n내용\n:::\n뒤 문단"

        result = extract_containers_from_html(text)

        assert len(result.containers) == 1
        assert result.plain_text == "앞 문단\n\n뒤 문단"

    def test_identical_blocks_are_each_removed_once(self) -> None:
        block = "::: note\n같은 내용\n:::"
        text = f"A\n{block}\nB\n{block}\nC"

        result = extract_containers_from_html(text)

        assert len(result.containers) == 2
        assert result.containers[0].raw == result.containers[1].raw
        assert result.plain_text == "A\n\nB\n\nC"

    def test_block_with_nonstandard_header_is_left_in_place(self) -> None:
        text = ":::tip\n내용\n:::"

        result = extract_containers_from_html(text)

        assert len(result.containers) == 1
        assert result.plain_text == text
