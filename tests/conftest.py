import pytest


@pytest.fixture
def source_record():
    return {
        "email": "a@x.com",
        "first_name": "Jo",
        "last_name": "Doe",
        "encrypted_password": "p1",
    }


@pytest.fixture
def destination_record():
    return {
        "email": "a@x.com",
        "first_name": "Joe",
        "last_name": "Doe",
        "encrypted_password": "p1",
    }


@pytest.fixture
def compared_fields():
    return ["first_name", "last_name", "encrypted_password"]


@pytest.fixture
def write_csv(tmp_path):
    def _write(name, content):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write
