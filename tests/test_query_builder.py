import pytest

from film_library.pagination import Pagination
from film_library.query_builder import SelectQueryBuilder


def full_builder():
    return SelectQueryBuilder("SELECT x FROM t") \
        .where("a = :a", a=1) \
        .order_by("name", "desc") \
        .join("j ON j.id = t.j_id") \
        .where("LOWER(b) LIKE :b", b="%foo%") \
        .add_pagination(Pagination(2, 5))


def test_fragments_render_in_fixed_order():
    sql = full_builder().build()

    assert sql == (
        "SELECT x FROM t JOIN j ON j.id = t.j_id "
        "WHERE a = :a AND LOWER(b) LIKE :b "
        "ORDER BY name DESC LIMIT 5 OFFSET 5"
    )


def test_build_is_repeatable():
    builder = full_builder()

    assert builder.build() == builder.build()
    assert full_builder().build() == builder.build()


def test_params_are_collected_not_inlined():
    builder = full_builder()

    assert builder.params == {"a": 1, "b": "%foo%"}
    assert "foo" not in builder.build()


def test_only_base_and_pagination():
    sql = SelectQueryBuilder("SELECT * FROM films").add_pagination(Pagination()).build()

    assert sql == "SELECT * FROM films LIMIT 10 OFFSET 0"


def test_joins_keep_registration_order():
    sql = SelectQueryBuilder("SELECT * FROM a") \
        .left_join("b ON b.a_id = a.id") \
        .join("c ON c.b_id = b.id") \
        .add_pagination(Pagination(1, 1)) \
        .build()

    assert sql == "SELECT * FROM a LEFT JOIN b ON b.a_id = a.id JOIN c ON c.b_id = b.id LIMIT 1 OFFSET 0"


@pytest.mark.parametrize("direction, expected", [
    ("asc", "ASC"),
    ("DESC", "DESC"),
    ("sideways", "ASC"),
    ("", "ASC"),
])
def test_order_direction_is_normalized(direction, expected):
    sql = SelectQueryBuilder("SELECT * FROM t").order_by("rating", direction).add_pagination(Pagination()).build()

    assert f"ORDER BY rating {expected} LIMIT" in sql


def test_several_order_keys():
    sql = SelectQueryBuilder("SELECT * FROM t") \
        .order_by("a.id") \
        .order_by("f.id", "desc") \
        .add_pagination(Pagination()) \
        .build()

    assert "ORDER BY a.id ASC, f.id DESC" in sql


def test_pagination_is_mandatory():
    with pytest.raises(ValueError):
        SelectQueryBuilder("SELECT * FROM t").build()


def test_conflicting_parameter_values_are_rejected():
    builder = SelectQueryBuilder("SELECT * FROM t").where("a = :v", v=1)

    with pytest.raises(ValueError):
        builder.where("b = :v", v=2)
