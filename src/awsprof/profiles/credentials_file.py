"""Reader for the access key CSV downloaded from the AWS console."""

import csv
from pathlib import Path

from ..aws.exceptions import CredentialFileError, InvalidPathError

ACCESS_KEY_COLUMN = "Access key ID"
SECRET_KEY_COLUMN = "Secret access key"


def read_credential_file(path: str | Path) -> tuple[str, str]:
    """Read an access key id and secret from a CSV file.

    The first data row is used. Header names are matched ignoring
    surrounding whitespace.

    Args:
        path: CSV file path

    Returns:
        (access key id, secret access key)

    Raises:
        InvalidPathError: If the file does not exist
        CredentialFileError: If the columns or a data row are missing
    """
    path = Path(path).expanduser()
    if not path.is_file():
        raise InvalidPathError(str(path))

    with open(path, newline="", encoding="utf-8-sig") as f:
        reader = csv.DictReader(f)
        columns = {(name or "").strip(): name for name in reader.fieldnames or []}
        missing = [c for c in (ACCESS_KEY_COLUMN, SECRET_KEY_COLUMN) if c not in columns]
        if missing:
            raise CredentialFileError(
                f"{path} is missing column(s): {', '.join(repr(c) for c in missing)}"
            )

        for row in reader:
            key_id = (row.get(columns[ACCESS_KEY_COLUMN]) or "").strip()
            secret = (row.get(columns[SECRET_KEY_COLUMN]) or "").strip()
            if key_id and secret:
                return key_id, secret

    raise CredentialFileError(f"{path} has no row with both an access key ID and a secret")
