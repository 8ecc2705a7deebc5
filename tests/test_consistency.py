from flagskit import consistency
from flagskit import phone_codes


def test_shipped_tables_are_consistent():
    assert consistency.find_table_problems() == []


def test_bad_table_entries_are_reported(monkeypatch):
    table = dict(phone_codes.PHONE_CODE_COUNTRY_MAP)
    table['12a'] = 'US'
    table['999'] = 'QQ'
    table['998'] = 'usa'
    monkeypatch.setattr(phone_codes, 'PHONE_CODE_COUNTRY_MAP', table)

    problems = consistency.find_table_problems()

    assert "Phone code '12a' is not 1-4 digits" in problems
    assert "Phone code +999 maps to QQ, which has no country name" in problems
    assert "Phone code +998 maps to invalid country code 'usa'" in problems
    assert len(problems) == 3
