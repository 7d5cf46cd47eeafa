from citygrid.hospital import Hospital


def test_fields_are_kept():
    hospital = Hospital("H01", "PIMS", "G-8", 40, "General, Cardiology")
    assert hospital.hospital_id == "H01"
    assert hospital.name == "PIMS"
    assert hospital.sector == "G-8"
    assert hospital.emergency_beds == 40
    assert hospital.specialization == "General, Cardiology"


def test_defaults_are_empty():
    hospital = Hospital()
    assert hospital.hospital_id == ""
    assert hospital.emergency_beds == 0
    assert hospital.has_available_beds() is False


def test_negative_beds_clamp_to_zero():
    hospital = Hospital("H01", "PIMS", "G-8", 10, "General")
    hospital.emergency_beds = -3
    assert hospital.emergency_beds == 0


def test_has_available_beds():
    hospital = Hospital("H01", "PIMS", "G-8", 1, "General")
    assert hospital.has_available_beds() is True
    hospital.emergency_beds = 0
    assert hospital.has_available_beds() is False


def test_equality_compares_fields():
    assert Hospital("H01", "PIMS", "G-8", 5, "General") == Hospital(
        "H01", "PIMS", "G-8", 5, "General"
    )
    assert not Hospital("H01", "PIMS", "G-8", 5, "General") == Hospital(
        "H01", "PIMS", "G-8", 6, "General"
    )