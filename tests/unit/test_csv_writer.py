import csv
import json

from record_recon.integrations.csv_writer import write_bucket, write_buckets, write_summary


def _read(path):
    with open(path, newline="", encoding="utf-8") as handle:
        return list(csv.reader(handle))


def test_write_buckets_one_file_per_bucket(tmp_path):
    buckets = {
        "unmatched": [{"email": "a@x.com", "first_name": "Jo"}],
        "fully_matched": [],
    }

    paths = write_buckets(buckets, tmp_path / "out")

    assert paths["unmatched"] == tmp_path / "out" / "unmatched.csv"
    assert paths["fully_matched"].exists()
    assert _read(paths["unmatched"]) == [["email", "first_name"], ["a@x.com", "Jo"]]


def test_header_is_union_of_fields(tmp_path):
    records = [{"email": "a@x.com"}, {"email": "b@x.com", "first_name": "Ann"}]

    path = write_bucket(tmp_path / "b.csv", records)

    assert _read(path) == [
        ["email", "first_name"],
        ["a@x.com", ""],
        ["b@x.com", "Ann"],
    ]


def test_empty_bucket_uses_default_header(tmp_path):
    paths = write_buckets(
        {"password_mismatch": []},
        tmp_path,
        default_fieldnames={"password_mismatch": ["email", "encrypted_password"]},
    )

    assert _read(paths["password_mismatch"]) == [["email", "encrypted_password"]]


def test_empty_bucket_without_default_is_empty_file(tmp_path):
    path = write_bucket(tmp_path / "empty.csv", [])

    assert path.read_text() == ""


def test_write_bucket_delimiter(tmp_path):
    path = write_bucket(tmp_path / "b.csv", [{"email": "a@x.com", "last_name": "Doe"}], delimiter=";")

    assert path.read_text().splitlines() == ["email;last_name", "a@x.com;Doe"]


def test_write_summary(tmp_path):
    path = write_summary({"counts": {"unmatched": 2}}, tmp_path / "out")

    assert path.name == "summary.json"
    assert json.loads(path.read_text()) == {"counts": {"unmatched": 2}}
