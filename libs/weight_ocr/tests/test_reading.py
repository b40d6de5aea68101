from weight_ocr.reading import clip_digits, parse_weight

def test_value_and_unit():
    r = parse_weight("12.34kg")
    assert (r.value, r.unit) == ("12.34", "kg")

def test_long_number_clipped_without_unit():
    r = parse_weight("123456")
    assert (r.value, r.unit) == ("1234", "")

def test_no_digits():
    r = parse_weight("no reading")
    assert r.value is None
    assert r.unit is None

def test_first_number_wins():
    assert parse_weight("250g | 12kg").value == "250"

def test_unit_case_and_spacing():
    r = parse_weight("weight 5 KG")
    assert (r.value, r.unit) == ("5", "kg")

def test_ocr_letter_aliases():
    assert parse_weight("1.5l").unit == "lb"
    assert parse_weight("3k").unit == "kg"
    assert parse_weight("2j").unit == "jin"
    assert parse_weight("7 jin").unit == "jin"
    assert parse_weight("0.5oz").unit == "oz"

def test_clip_digits():
    assert clip_digits("12.3456") == "12.34"
    assert clip_digits("1.23456") == "1.234"
    assert clip_digits("12345.6") == "1234"
    assert clip_digits("1234.5") == "1234"
    assert clip_digits("99.5") == "99.5"

def test_only_ascii_digits_count():
    r = parse_weight("٣ 12kg")
    assert (r.value, r.unit) == ("12", "kg")
    assert parse_weight("٣٤").value is None
