"""Tests for AccountManager and the credential file reader."""

import pytest

from awsprof.aws.exceptions import CredentialFileError, InvalidPathError, ProfileNotFoundError
from awsprof.profiles import AccountManager, read_credential_file

from conftest import FakeAws, FakePrompter


@pytest.fixture
def key_csv(tmp_path):
    path = tmp_path / "accessKeys.csv"
    path.write_text(
        "\ufeffAccess key ID,Secret access key\nAKIAEXAMPLE,abcdSECRET\n",
        encoding="utf-8",
    )
    return path


class TestCreateAccount:
    def test_create_from_file_sets_only_keys(self, key_csv):
        aws = FakeAws()
        manager = AccountManager(aws, FakePrompter())

        assert manager.create("work", key_csv) is True

        assert aws.profiles == {
            "work:iam": {
                "aws_access_key_id": "AKIAEXAMPLE",
                "aws_secret_access_key": "abcdSECRET",
            }
        }

    def test_create_prompts_when_no_file(self):
        aws = FakeAws()
        prompter = FakePrompter(secrets=["AKIAPROMPT", "promptsecret"])

        AccountManager(aws, prompter).create("home")

        assert prompter.asked == ["Access key ID", "Secret access key"]
        assert aws.profiles["home:iam"]["aws_access_key_id"] == "AKIAPROMPT"
        assert aws.profiles["home:iam"]["aws_secret_access_key"] == "promptsecret"

    def test_create_existing_is_noop(self, key_csv):
        aws = FakeAws({"work:iam": {"aws_access_key_id": "AKIAOLD", "aws_secret_access_key": "old"}})
        prompter = FakePrompter()

        assert AccountManager(aws, prompter).create("work", key_csv) is False

        assert aws.writes == []
        assert prompter.asked == []
        assert aws.profiles["work:iam"]["aws_access_key_id"] == "AKIAOLD"

    def test_create_with_missing_file_fails(self, tmp_path):
        aws = FakeAws()

        with pytest.raises(InvalidPathError):
            AccountManager(aws, FakePrompter()).create("work", tmp_path / "missing.csv")

        assert aws.writes == []


class TestEditAccount:
    def test_edit_missing_account_fails(self, key_csv):
        aws = FakeAws()

        with pytest.raises(ProfileNotFoundError) as exc:
            AccountManager(aws, FakePrompter()).edit("work", key_csv)

        assert exc.value.name == "work:iam"
        assert aws.writes == []

    def test_edit_replaces_keys(self, key_csv):
        aws = FakeAws({"work:iam": {"aws_access_key_id": "AKIAOLD", "aws_secret_access_key": "old"}})

        AccountManager(aws, FakePrompter()).edit("work", key_csv)

        assert aws.profiles["work:iam"]["aws_access_key_id"] == "AKIAEXAMPLE"
        assert aws.profiles["work:iam"]["aws_secret_access_key"] == "abcdSECRET"


class TestCredentialFile:
    def test_reads_console_export(self, key_csv):
        assert read_credential_file(key_csv) == ("AKIAEXAMPLE", "abcdSECRET")

    def test_header_whitespace_and_extra_columns(self, tmp_path):
        path = tmp_path / "keys.csv"
        path.write_text("User name, Access key ID ,Secret access key\nme,AKIA1,s1\n")

        assert read_credential_file(path) == ("AKIA1", "s1")

    def test_missing_column(self, tmp_path):
        path = tmp_path / "keys.csv"
        path.write_text("Access key ID\nAKIA1\n")

        with pytest.raises(CredentialFileError, match="Secret access key"):
            read_credential_file(path)

    def test_no_data_row(self, tmp_path):
        path = tmp_path / "keys.csv"
        path.write_text("Access key ID,Secret access key\n")

        with pytest.raises(CredentialFileError):
            read_credential_file(path)

    def test_directory_is_invalid_path(self, tmp_path):
        with pytest.raises(InvalidPathError):
            read_credential_file(tmp_path)
