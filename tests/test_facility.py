from citygrid.facility import Facility


def make_facility(**overrides):
    values = dict(
        facility_id="FCL01",
        name="Central Park",
        facility_type="Park",
        sector="F-7",
        vertex_id="FCL01",
    )
    values.update(overrides)
    return Facility(**values)


def test_complete_facility_is_valid():
    assert make_facility().is_valid() is True


def test_default_facility_is_invalid():
    assert Facility().is_valid() is False


def test_missing_required_field_makes_facility_invalid():
    for field in ("facility_id", "name", "facility_type", "vertex_id"):
        assert make_facility(**{field: ""}).is_valid() is False


def test_sector_is_optional_for_validity():
    assert make_facility(sector="").is_valid() is True


def test_describe_lists_all_fields_in_order():
    lines = make_facility().describe().splitlines()
    assert lines == [
        "Facility ID: FCL01",
        "Name: Central Park",
        "Type: Park",
        "Sector: F-7",
        "Vertex ID: FCL01",
    ]


def test_fields_are_mutable():
    facility = make_facility()
    facility.name = "Faisal Mosque"
    facility.facility_type = "Mosque"
    assert "Name: Faisal Mosque" in facility.describe()
    assert "Type: Mosque" in facility.describe()