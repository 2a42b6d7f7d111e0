"""Tests for structural card splitting."""

from anki_splitter.models import ContainerType
from anki_splitter.parser.cloze import get_used_cloze_numbers
from anki_splitter.parser.container import is_link_container, parse_containers
from anki_splitter.parser.nid_link import parse_nid_links
from anki_splitter.splitter.atomic import (
    DEFAULT_FRAGMENT_TITLE,
    extract_title,
    extract_todo_blocks,
    has_meaningful_content,
    perform_hard_split,
)

LONG_BODY = "이 문장은 카드 하나로 쓰기에 충분히 긴 설명을 담고 있습니다"


class TestPerformHardSplit:
    """Splitting on #### headers."""

    def test_two_headers_give_main_and_linked_card(self, two_section_card, source_nid) -> None:
        fragments = perform_hard_split(two_section_card, source_nid)

        assert fragments is not None
        assert len(fragments) == 2
        main, second = fragments

        assert main.is_main_card
        assert not any(is_link_container(b) for b in parse_containers(main.content))
        assert source_nid not in main.content

        assert not second.is_main_card
        links = [b for b in parse_containers(second.content) if is_link_container(b)]
        assert len(links) == 1
        back_links = parse_nid_links(links[0].content)
        assert [link.nid for link in back_links] == [source_nid]

    def test_titles_come_from_headers(self, two_section_card, source_nid) -> None:
        fragments = perform_hard_split(two_section_card, source_nid)

        assert [f.title for f in fragments] == ["🌐 DNS 레코드 종류", "🔁 CNAME 레코드"]

    def test_header_line_starts_its_section(self, two_section_card, source_nid) -> None:
        main, second = perform_hard_split(two_section_card, source_nid)

        assert main.content.startswith("#### 🌐 DNS 레코드 종류<br>")
        assert "CNAME" not in main.content
        assert second.content.startswith("#### 🔁 CNAME 레코드<br>")

    def test_clozes_are_reset_to_one(self, two_section_card, source_nid) -> None:
        fragments = perform_hard_split(two_section_card, source_nid)

        for fragment in fragments:
            assert get_used_cloze_numbers(fragment.content) == [1]
        assert "{{c1::다른 도메인 이름의 별칭}}" in fragments[1].content

    def test_images_and_links_are_collected(self, two_section_card, source_nid) -> None:
        main, second = perform_hard_split(two_section_card, source_nid)

        assert main.images == []
        assert main.nid_links == []
        assert second.images == ["cname-diagram.png"]
        assert second.nid_links == ["1234567890123"]

    def test_numeric_source_id(self, two_section_card) -> None:
        _, second = perform_hard_split(two_section_card, 1726891647690)

        assert "|nid1726891647690]" in second.content

    def test_custom_source_title(self, two_section_card, source_nid) -> None:
        _, second = perform_hard_split(two_section_card, source_nid, source_title="DNS 원본")

        assert "[Source: DNS 원본|nid" in second.content

    def test_back_link_block_is_a_link_container(self, two_section_card, source_nid) -> None:
        _, second = perform_hard_split(two_section_card, source_nid)

        block = parse_containers(second.content)[-1]
        assert block.type is ContainerType.LINK
        assert block.title == "Related cards"


class TestIneligibleCards:
    """Cases that return None."""

    def test_single_header_returns_none(self, source_nid) -> None:
        assert perform_hard_split(f"#### 하나<br>{LONG_BODY}", source_nid) is None

    def test_dividers_alone_return_none(self, source_nid) -> None:
        text = f"{LONG_BODY}<br>---<br>{LONG_BODY}<br>---<br>{LONG_BODY}"

        assert perform_hard_split(text, source_nid) is None

    def test_only_one_meaningful_section_returns_none(self, source_nid) -> None:
        text = f"#### 짧음<br>x<br>#### 충분<br>{LONG_BODY}"

        assert perform_hard_split(text, source_nid) is None


class TestShortSections:
    """Sections under 20 characters of text are dropped."""

    def test_short_section_is_skipped(self, source_nid) -> None:
        text = f"#### A<br>짧음<br>#### B<br>{LONG_BODY}<br>#### C<br>{LONG_BODY}"

        fragments = perform_hard_split(text, source_nid)

        assert [f.title for f in fragments] == ["B", "C"]
        assert fragments[0].is_main_card
        assert not fragments[1].is_main_card

    def test_markup_does_not_count_as_text(self) -> None:
        assert not has_meaningful_content("<b><span style='color:red'>짧은</span></b><br><br>")
        assert has_meaningful_content(f"<b>{LONG_BODY}</b>")

    def test_every_fragment_has_enough_text(self, two_section_card, source_nid) -> None:
        for fragment in perform_hard_split(two_section_card, source_nid):
            assert has_meaningful_content(fragment.content)


class TestPreambleAndTitles:
    """Text before the first header and title fallbacks."""

    def test_preamble_becomes_main_card(self, source_nid) -> None:
        text = (
            f"<b>핵심 개념</b> {LONG_BODY}<br>"
            f"#### 하나<br>{LONG_BODY}<br>"
            f"#### 둘<br>{LONG_BODY}"
        )

        fragments = perform_hard_split(text, source_nid)

        assert len(fragments) == 3
        assert fragments[0].title == "핵심 개념"
        assert fragments[0].is_main_card
        assert [f.is_main_card for f in fragments[1:]] == [False, False]

    def test_extract_title_prefers_subheading(self) -> None:
        assert extract_title("## 소제목<br><b>굵게</b>") == "소제목"

    def test_extract_title_uses_bold(self) -> None:
        assert extract_title("본문 <b>  강조된 부분 </b> 끝") == "강조된 부분"

    def test_extract_title_truncates(self) -> None:
        assert len(extract_title("### " + "가" * 80)) == 50

    def test_extract_title_placeholder(self) -> None:
        assert extract_title("제목 없는 본문") == DEFAULT_FRAGMENT_TITLE


class TestTodoBlocks:
    """Todo toggles are reported without being removed."""

    def test_todo_blocks_are_listed(self, nested_container_card) -> None:
        result = extract_todo_blocks(nested_container_card)

        assert result.main_content == nested_container_card
        assert result.todo_blocks == ["::: toggle todo 정리 필요\n나중에 보강할 내용\n:::"]

    def test_no_todo_blocks(self) -> None:
        result = extract_todo_blocks("::: tip\n팁\n:::")

        assert result.todo_blocks == []
