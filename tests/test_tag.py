from kooala.tag import Tag


def test_default_tag():
    tag = Tag()
    assert tag.name == ""
    assert tag.tag_id == 0


def test_name_only():
    tag = Tag("School")
    assert tag.name == "School"
    assert tag.tag_id == 0


def test_name_and_id():
    tag = Tag("School", tag_id=2)
    assert tag.name == "School"
    assert tag.tag_id == 2


def test_change_id():
    tag = Tag("School")
    tag.tag_id = 5
    assert tag == Tag("School", 5)