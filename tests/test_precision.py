from dicomkit.dcmtime.precision import PrecisionLevel


def test_str_uses_names():
    assert str(PrecisionLevel(0)) == "FULL"
    assert str(PrecisionLevel(PrecisionLevel.MS3.value)) == "MS3"
    assert str(PrecisionLevel(PrecisionLevel.HOURS.value)) == "HOURS"
    assert str(PrecisionLevel(PrecisionLevel.MONTH.value)) == "MONTH"


def test_str_round_trips_through_name_lookup():
    for level in PrecisionLevel:
        rebuilt = PrecisionLevel(level.value)
        assert PrecisionLevel[str(rebuilt)] is level


def test_full_is_most_precise_and_year_least():
    levels = list(PrecisionLevel)
    assert PrecisionLevel(0) is levels[0]
    assert PrecisionLevel(0) is PrecisionLevel.FULL
    assert PrecisionLevel(levels[-1].value) is PrecisionLevel.YEAR


def test_levels_strictly_increase_in_declaration_order():
    values = [PrecisionLevel(level.value).value for level in PrecisionLevel]
    assert values == sorted(values)
    assert len(set(values)) == len(values)


def test_fraction_levels_sit_between_full_and_seconds():
    fractions = [PrecisionLevel(value) for value in range(1, 6)]
    assert [str(level) for level in fractions] == ["MS5", "MS4", "MS3", "MS2", "MS1"]
    for level in fractions:
        assert PrecisionLevel.FULL < level < PrecisionLevel.SECONDS