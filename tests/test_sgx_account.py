import base64
import json
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest

from matrixsdk.common import InvalidContractAccountError, InvalidParamError, SdkError
from matrixsdk.sgx_account import AccountSgx, create_account_sgx, retrieve_account_sgx

ADDR = "jB3iS35PCdUpDZ879LHJUqLHCzxETftXG"
CONTRACT_ACCOUNT = "XC1234567890123451@xuper"


def _reply(code, msg, data=None):
    doc = {"code": code, "msg": msg, "data": None}
    if data is not None:
        doc["data"] = base64.b64encode(data).decode("ascii")
    return json.dumps(doc).encode("utf-8")


def _is_exist(body):
    known = json.loads(body).get("address") == ADDR
    return _reply(200, "ok", b"true" if known else b"false")


class _Handler(BaseHTTPRequestHandler):
    def _serve(self):
        length = int(self.headers.get("Content-Length") or 0)
        body = self.rfile.read(length) if length else b""
        self.server.requests.append((self.command, self.path, body))
        status, payload = self.server.routes.get(self.path, (404, _reply(404, "not found")))
        if callable(payload):
            payload = payload(body)
        self.send_response(status)
        self.send_header("Content-Length", str(len(payload)))
        self.end_headers()
        self.wfile.write(payload)

    do_GET = _serve
    do_POST = _serve

    def log_message(self, *args):
        pass


@pytest.fixture
def server():
    httpd = ThreadingHTTPServer(("127.0.0.1", 0), _Handler)
    httpd.requests = []
    httpd.routes = {"/is-exist": (200, _is_exist)}
    thread = threading.Thread(target=httpd.serve_forever, daemon=True)
    thread.start()
    yield httpd
    httpd.shutdown()
    httpd.server_close()


def _url(httpd):
    return f"http://127.0.0.1:{httpd.server_address[1]}"


def test_create_account(server):
    server.routes["/create"] = (200, _reply(200, "ok", ADDR.encode()))
    acc = create_account_sgx(_url(server))
    assert acc.address == ADDR
    assert acc.api.url == _url(server)
    assert server.requests[0][:2] == ("GET", "/create")


def test_create_account_error_code(server):
    server.routes["/create"] = (500, _reply(500, "failed"))
    with pytest.raises(SdkError, match="create error"):
        create_account_sgx(_url(server))


def test_retrieve_existing_account(server):
    acc = retrieve_account_sgx(_url(server), ADDR)
    assert acc.address == ADDR
    method, path, body = server.requests[0]
    assert (method, path) == ("POST", "/is-exist")
    assert json.loads(body) == {"address": ADDR}


def test_retrieve_unknown_account(server):
    with pytest.raises(SdkError, match="RetrieveAccountSgx error"):
        retrieve_account_sgx(_url(server), "unknownaddress")


def test_retrieve_requires_url_and_addr():
    with pytest.raises(InvalidParamError, match="nil url or addr"):
        retrieve_account_sgx("", ADDR)
    with pytest.raises(InvalidParamError):
        retrieve_account_sgx("http://127.0.0.1:1", "")


def test_contract_account():
    acc = AccountSgx(address=ADDR)
    assert acc.auth_require == ADDR
    assert not acc.has_contract_account
    acc.set_contract_account(CONTRACT_ACCOUNT)
    assert acc.contract_account == CONTRACT_ACCOUNT
    assert acc.auth_require == CONTRACT_ACCOUNT + "/" + ADDR


def test_invalid_contract_account_is_rejected():
    acc = AccountSgx(address=ADDR)
    with pytest.raises(InvalidContractAccountError):
        acc.set_contract_account("XC123@xuper")
    assert acc.contract_account == ""