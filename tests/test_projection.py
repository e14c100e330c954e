from app.industry import TENSILE
from app.normalizers import normalize
from app.profiles import CategoryProfile, ProfileRegistry, load_profiles
from app.projection import NoData, ProjectionResult, project

PROFILES = load_profiles()

def _fields(p):
    return [f.field for f in p.fields]

def test_known_category_follows_declared_order():
    records = [
        {"W_m": "2", "Color_Code": "RED", "Product_Name": "Awning", "Extra": "x"},
        {"GSM": "650", "Product_Name": "Canopy"},
    ]
    p = project(TENSILE, records, PROFILES)
    assert isinstance(p, ProjectionResult)
    # declared order, not discovery order; undeclared fields left out
    assert _fields(p) == ["Product_Name", "Color_Code", "GSM", "W_m"]
    assert p.labels == ["Product Name", "Color Code", "GSM", "Width (m)"]
    assert p.rows() == [["Awning", "RED", "-", "2"], ["Canopy", "-", "650", "-"]]

def test_falsy_columns_dropped_when_no_record_has_data():
    rec = normalize({"Product_Name": {"display_value": "Awning"}, "RM": "", "W_m": 0})
    p = project(TENSILE, [rec], PROFILES)
    assert _fields(p) == ["Product_Name"]

    other = {"Product_Name": "Canopy", "RM": "FAB-1", "W_m": "3"}
    p = project(TENSILE, [rec, other], PROFILES)
    assert _fields(p) == ["Product_Name", "RM", "W_m"]
    assert p.rows()[0] == ["Awning", "-", "-"]

def test_placeholder_and_na_are_not_data():
    records = [{"Remarks2": "N/A", "RM": "-", "Product_Name": "A"}, {"Remarks2": " n/a "}]
    p = project(TENSILE, records, PROFILES)
    assert _fields(p) == ["Product_Name"]
    assert p.rows() == [["A"], ["-"]]

def test_unknown_category_uses_first_seen_order():
    records = [
        {"Sign_Type": "LED", "Empty": "", "Width": "2"},
        {"Height": "1", "Sign_Type": "Neon"},
    ]
    p = project(None, records, PROFILES)
    assert _fields(p) == ["Sign_Type", "Width", "Height"]
    assert p.labels == ["Sign Type", "Width", "Height"]
    # same input, same output
    assert project(None, records, PROFILES) == p

def test_unregistered_category_falls_back_to_union():
    p = project("Awnings", [{"Arm_Length": "3"}], PROFILES)
    assert p.labels == ["Arm Length"]

def test_no_data_outcome():
    assert isinstance(project(TENSILE, [], PROFILES), NoData)
    assert project(None, [{"A": "", "B": "-"}], PROFILES, empty_message="nothing") == NoData("nothing")

def test_injected_registry():
    reg = ProfileRegistry([CategoryProfile(key="K", fields=("B", "A", "ID"), labels={"A": "Alpha"})])
    p = project("K", [{"A": "1", "B": "2", "ID": "9"}], reg)
    assert _fields(p) == ["B", "A"]
    assert p.labels == ["B", "Alpha"]
