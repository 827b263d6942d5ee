from src.fleet_rent.fleet_rent.database.bootstrap import _iter_sql_statements, _strip_create_db_and_use


def test_sql_splitter_handles_comments_and_quoted_semicolons():
    sql = "-- header\nCREATE TABLE a (x INT);\nINSERT INTO a VALUES ('x;y');\n"

    assert list(_iter_sql_statements(sql)) == ["CREATE TABLE a (x INT)", "INSERT INTO a VALUES ('x;y')"]


def test_strip_create_database_and_use():
    sql = "CREATE DATABASE IF NOT EXISTS fleet_db;\nUSE fleet_db;\nCREATE TABLE t (id INT);"

    assert list(_iter_sql_statements(_strip_create_db_and_use(sql))) == ["CREATE TABLE t (id INT)"]
