from gh_local_sync.domain.models import OperationRequest, OperationResult
from gh_local_sync.infra import github

RUN = "gh_local_sync.infra.github.run"


def _stub(monkeypatch, success, output, seen=None):
    def fake_run(executable, args, working_directory, identifier, quiet=False):
        if seen is not None:
            seen.append((executable, list(args), quiet))
        request = OperationRequest(executable, tuple(args), working_directory, identifier)
        return OperationResult(request=request, success=success, output=output, exit_code=0 if success else 1)

    monkeypatch.setattr(RUN, fake_run)


def test_fetch_login(monkeypatch):
    seen = []
    _stub(monkeypatch, True, "  octocat \n", seen)
    assert github.fetch_login() == "octocat"
    assert seen == [("gh", ["api", "user", "--jq", ".login"], True)]


def test_fetch_login_unauthenticated(monkeypatch):
    _stub(monkeypatch, False, "gh auth login required")
    assert github.fetch_login() == ""


def test_fetch_organizations(monkeypatch):
    _stub(monkeypatch, True, "acme\n\nwidgets\n")
    assert github.fetch_organizations() == ["acme", "widgets"]


def test_fetch_organizations_failure(monkeypatch):
    _stub(monkeypatch, False, "HTTP 403")
    assert github.fetch_organizations() == []


def test_fetch_repo_names(monkeypatch):
    seen = []
    _stub(monkeypatch, True, "acme/web\nacme/api\n", seen)
    assert github.fetch_repo_names("acme", limit=50) == ["acme/web", "acme/api"]
    assert seen[0][1][:5] == ["repo", "list", "acme", "--limit", "50"]


def test_fetch_repo_names_failure_is_empty_with_diagnostic(monkeypatch, capsys):
    _stub(monkeypatch, False, "GraphQL: Could not resolve to a User")
    assert github.fetch_repo_names("nobody") == []
    assert "Could not list repositories of nobody" in capsys.readouterr().err
