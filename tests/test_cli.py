import logging

import httpx
import pytest

from moada import cli
from tests.conftest import PUBLIC_ID, account_data, file_data


@pytest.fixture
def cli_exchange(exchange, monkeypatch):
    monkeypatch.setattr(cli, "create_client", lambda base_url: exchange.client())
    return exchange


def test_upload(cli_exchange, tmp_path, capsys):
    path = tmp_path / "a.txt"
    path.write_bytes(b"0123456789")
    cli_exchange.on("POST", "/sendFile", httpx.Response(200, json={"message": "ok", "data": file_data()}))

    assert cli.main(["upload", str(path)]) == 0

    out = capsys.readouterr().out
    assert f"Public Id: {PUBLIC_ID}" in out
    assert "Private Id: priv123" in out


def test_upload_missing_file(cli_exchange, tmp_path, capsys):
    assert cli.main(["upload", str(tmp_path / "nope.txt")]) == 2
    assert cli_exchange.requests == []


def test_download_saves_into_directory(cli_exchange, tmp_path, capsys):
    cli_exchange.on(
        "GET",
        "/downloadFile",
        httpx.Response(200, content=b"hello", headers={"Content-Disposition": 'attachment; filename="hello.txt"'}),
    )

    assert cli.main(["download", PUBLIC_ID, "--to", str(tmp_path)]) == 0

    assert (tmp_path / "hello.txt").read_bytes() == b"hello"
    assert f"Saved 5 bytes to {tmp_path / 'hello.txt'}" in capsys.readouterr().out


def test_download_invalid_id(cli_exchange, tmp_path, capsys):
    assert cli.main(["download", "zz", "--to", str(tmp_path)]) == 1

    assert "InvalidIdentifier" in capsys.readouterr().err
    assert cli_exchange.requests == []


def test_me_reports_anomalies(cli_exchange, capsys):
    cli_exchange.on("GET", "/myInfo", httpx.Response(200, json={"data": account_data(FilesNumber=3)}))

    assert cli.main(["me"]) == 0

    out = capsys.readouterr().out
    assert "Files Number: 3" in out
    assert "[WARNING] FilesNumber is 3 but 2 file id(s) were listed" in out


def test_delete(cli_exchange, capsys):
    cli_exchange.on("POST", "/deleteFile", httpx.Response(200, json={"message": "File deleted successfully"}))

    assert cli.main(["delete", "priv123"]) == 0
    assert "File deleted successfully" in capsys.readouterr().out


def test_info_keeps_private_id_out_of_logs(cli_exchange, caplog, capsys):
    caplog.set_level(logging.DEBUG)
    cli_exchange.on("GET", "/fileInfo", httpx.Response(200, json={"data": file_data(idPrivate="SECRETPRIV")}))

    assert cli.main(["info", "SECRETPRIV"]) == 0

    assert "Private Id: SECRETPRIV" in capsys.readouterr().out
    assert not [r for r in caplog.records if "SECRETPRIV" in r.getMessage()]
