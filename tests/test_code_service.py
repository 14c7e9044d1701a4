from datetime import datetime

import pytest

from conftest import InMemoryCodeRepository, InMemoryWinnerRepository
from prize_admin.repositories import ById, BySubstring, SqlCodeRepository, SqlWinnerRepository
from prize_admin.services.code_service import CodeNotFound, CodeRuleViolation, CodeService, search_filter


@pytest.fixture()
def service(session):
    return CodeService(SqlCodeRepository(session), SqlWinnerRepository(session))


def _values(rows):
    return [row.value for row in rows]


def test_search_filter():
    assert search_filter(None) is None
    assert search_filter("") is None
    assert search_filter("42") == ById(42)
    assert search_filter("AB12") == BySubstring("value", "AB12")
    assert search_filter("²") == BySubstring("value", "²")


def test_get_paging_filters(service, seed):
    gift = seed.gift()
    seed.code("AAAAAA0001", gift_id=gift.id, used_at=datetime(2025, 1, 1))
    seed.code("AAAAAA0002", used_at=datetime(2025, 1, 2))
    seed.code("BBBBBB0003")

    everything = service.get_paging()
    used = service.get_paging(is_used=True)
    unused = service.get_paging(is_used=False)
    with_gift = service.get_paging(gift_id="withGift")
    by_gift = service.get_paging(gift_id=str(gift.id))
    by_search = service.get_paging(search="AAAAAA")

    assert _values(everything.data) == ["AAAAAA0002", "AAAAAA0001", "BBBBBB0003"]
    assert everything.total_used_count == 2
    assert _values(used.data) == ["AAAAAA0002", "AAAAAA0001"]
    assert _values(unused.data) == ["BBBBBB0003"]
    assert unused.total_used_count == 2
    assert _values(with_gift.data) == ["AAAAAA0001"]
    assert _values(by_gift.data) == ["AAAAAA0001"]
    assert by_search.total == 2


def test_get_paging_numeric_search_matches_id(service, seed):
    seed.code("AAAAAA0001")
    second = seed.code("AAAAAA0002")

    listing = service.get_paging(search=str(second.id))

    assert _values(listing.data) == ["AAAAAA0002"]


def test_get_paging_rejects_bad_gift_filter(service):
    with pytest.raises(CodeRuleViolation) as exc_info:
        service.get_paging(gift_id="someGift")
    assert exc_info.value.status_code == 400


def test_used_by_user_paging(service, seed):
    user = seed.user()
    other = seed.user("Other")
    seed.code("AAAAAA0001", used_by_id=user.id, used_at=datetime(2025, 1, 1))
    seed.code("AAAAAA0002", used_by_id=user.id, used_at=datetime(2025, 1, 2))
    seed.code("AAAAAA0003", used_by_id=other.id, used_at=datetime(2025, 1, 3))

    newest_id_first, total = service.get_used_by_user_paging(user.id)
    by_value_asc, _ = service.get_used_by_user_paging(user.id, order_by="value", order_type="asc")
    unknown_order, _ = service.get_used_by_user_paging(user.id, order_by="password")

    assert total == 2
    assert _values(newest_id_first) == ["AAAAAA0002", "AAAAAA0001"]
    assert _values(by_value_asc) == ["AAAAAA0001", "AAAAAA0002"]
    assert _values(unknown_order) == ["AAAAAA0002", "AAAAAA0001"]


def test_codes_by_month(service, seed):
    seed.code("AAAAAA0001", month="2025-01")
    seed.code("AAAAAA0002", month="2025-02")
    seed.code("BBBBBB0003", month="2025-01", used_at=datetime(2025, 1, 5))

    codes, total = service.get_codes_by_month("2025-01")
    searched, _ = service.get_codes_by_month("2025-01", search="BBB")

    assert total == 2
    assert _values(codes) == ["BBBBBB0003", "AAAAAA0001"]
    assert _values(searched) == ["BBBBBB0003"]


def test_check_code(service, seed):
    gift = seed.gift("Smartwatch", images=["w.png"])
    seed.code("AB1234CD56", gift_id=gift.id)
    seed.code("ZZ9999ZZ99")
    seed.winner("ab1234-cd56")

    winning = service.check_code("AB1234CD56")
    plain = service.check_code("ZZ9999ZZ99")

    assert winning.gift.name == "Smartwatch"
    assert winning.is_winner is True
    assert plain.gift is None
    assert plain.is_winner is False


def test_check_code_requires_exact_value(service, seed):
    seed.code("AB1234-CD56")

    with pytest.raises(CodeNotFound) as exc_info:
        service.check_code("AB1234CD56")
    assert exc_info.value.status_code == 404


def test_get_code_month_accepts_any_spelling(service, seed):
    seed.code("AB1234-CD56", month="2025-03")

    found = service.get_code_month("ab1234cd56")

    assert found.value == "AB1234-CD56"
    assert found.month == "2025-03"
    assert found.is_winner is False


def test_get_code_month_without_month(service, seed):
    seed.code("SHORT1", month="")

    assert service.get_code_month("short1").month is None


def test_get_code_month_not_found(service):
    with pytest.raises(CodeNotFound):
        service.get_code_month("nothing")


def test_give_gift(service, seed):
    code = seed.code("AB1234CD56")

    record = service.give_gift(code.id, "admin-7")

    assert record.gift_given_by == "admin-7"
    assert record.gift_given_at is not None


def test_give_gift_unknown_code():
    service = CodeService(InMemoryCodeRepository(), InMemoryWinnerRepository())

    with pytest.raises(CodeNotFound):
        service.give_gift(1, "admin-7")


def test_get_paging_rejects_non_decimal_gift_filter(service):
    with pytest.raises(CodeRuleViolation):
        service.get_paging(gift_id="²")


def test_superscript_digit_search_falls_back_to_substring(service, seed):
    seed.code("AB1234CD56")

    listing = service.get_paging(search="²")
    codes, total = service.get_codes_by_month("2025-01", search="²")

    assert listing.data == []
    assert listing.total == 0
    assert (codes, total) == ([], 0)
