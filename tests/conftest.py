"""Pytest configuration and fixtures for the test suite."""

import pytest

from anki_splitter.config import reset_config

SOURCE_NID = "1726891647690"


@pytest.fixture(autouse=True)
def _reset_active_config():
    """Each test starts without a cached configuration."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def source_nid():
    """Note id of the card being split."""
    return SOURCE_NID


@pytest.fixture
def two_section_card():
    """Card body with two #### sections separated by <br> tags."""
    return (
        "#### 🌐 DNS 레코드 종류<br>"
        "A 레코드는 {{c1::도메인을 IPv4 주소}}로 매핑한다.<br>"
        "AAAA 레코드는 {{c2::IPv6 주소}}를 가리킨다.<br>"
        "#### 🔁 CNAME 레코드<br>"
        "CNAME은 {{c3::다른 도메인 이름의 별칭}}을 정의한다.<br>"
        '<img src="cname-diagram.png"><br>'
        "자세한 내용은 [DNS 기초|nid1234567890123] 참고."
    )


@pytest.fixture
def nested_container_card():
    """Card body with a toggle holding a nested tip, plus a todo toggle."""
    return "\n".join(
        [
            "본문 시작",
            "::: toggle note 세부 설명",
            "바깥 내용",
            "::: tip 안쪽 팁",
            "안쪽 내용",
            ":::",
            "바깥 마무리",
            ":::",
            "::: toggle todo 정리 필요",
            "나중에 보강할 내용",
            ":::",
            "본문 끝",
        ]
    )
