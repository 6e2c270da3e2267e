from patternday.prototype import Basic


def _template():
    return Basic(name="王大明", age=12, resume_type="basic")


def test_clone_resume():
    r = _template()
    r_it = r.clone()
    r_it.resume_type = "IT"
    r_it.age = 11

    assert r == Basic(name="王大明", age=12, resume_type="basic")
    assert r_it == Basic(name="王大明", age=11, resume_type="IT")


def test_copy_resume():
    r = _template()
    r_it = r.copy()
    r_it.resume_type = "IT"
    r_it.age = 11

    assert r == Basic(name="王大明", age=12, resume_type="basic")
    assert r_it == Basic(name="王大明", age=11, resume_type="IT")


def test_clone_is_a_distinct_object_with_equal_fields():
    r = _template()
    c = r.clone()
    assert c == r
    assert c is not r