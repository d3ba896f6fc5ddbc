from types import SimpleNamespace

from src.config import JiraSection
from src.tracker.cookies import cookie_header, load_tracker_cookies
from src.tracker.issue_fetcher import JiraIssueFetcher, parse_issue_links
from src.tracker.models import IssueRef


NAVIGATOR_HTML = """
<table>
<tr>
  <td><a class="issue-link" data-issue-key="A1" href="/browse/A1">A1</a></td>
  <td><a class="issue-link" data-issue-key="A1" href="/browse/A1">Title A</a></td>
</tr>
<tr>
  <td><a class="issue-link" data-issue-key="B2" href="/browse/B2">B2</a></td>
  <td><a class="issue-link" data-issue-key="B2" href="/browse/B2">Title &amp; B</a></td>
</tr>
</table>
"""


def make_cookie(name, value, domain):
    return SimpleNamespace(name=name, value=value, domain=domain)


class FakeResponse:
    def __init__(self, text, status_code=200, reason="OK"):
        self.text = text
        self.status_code = status_code
        self.reason = reason

    @property
    def ok(self):
        return self.status_code < 400


class FakeSession:
    def __init__(self, response):
        self.response = response
        self.calls = []

    def get(self, url, headers=None, timeout=None):
        self.calls.append({"url": url, "headers": headers, "timeout": timeout})
        return self.response


def test_parse_issue_links_pairs_in_document_order():
    issues = parse_issue_links(NAVIGATOR_HTML)
    assert issues == [IssueRef("A1", "Title A"), IssueRef("B2", "Title &amp; B")]


def test_parse_issue_links_drops_unpaired_link():
    body = NAVIGATOR_HTML + '<a class="issue-link" data-issue-key="C3">C3</a>'
    assert [issue.key for issue in parse_issue_links(body)] == ["A1", "B2"]


def test_parse_issue_links_empty_body():
    assert parse_issue_links("<html></html>") == []


def test_load_tracker_cookies_filters_by_domain_suffix():
    cookies = [
        make_cookie("JSESSIONID", "abc", ".tracker.example.com"),
        make_cookie("other", "x", "ads.example.org"),
    ]
    selected = load_tracker_cookies("tracker.example.com", source=lambda domain: cookies)
    assert [cookie.name for cookie in selected] == ["JSESSIONID"]
    assert cookie_header(selected) == "JSESSIONID=abc"


def test_fetch_sends_cookies_and_filter_url():
    config = JiraSection(host="https://tracker.example.com/", **{"filter-id": "777"})
    session = FakeSession(FakeResponse(NAVIGATOR_HTML))
    cookies = [make_cookie("JSESSIONID", "abc", "tracker.example.com"), make_cookie("xsrf", "t", "tracker.example.com")]
    fetcher = JiraIssueFetcher(config, session=session, cookie_source=lambda domain: cookies)

    issues = fetcher.fetch()

    assert len(issues) == 2
    call = session.calls[0]
    assert call["url"] == "https://tracker.example.com/issues/?filter=777"
    assert call["headers"] == {"Cookie": "JSESSIONID=abc; xsrf=t"}


def test_fetch_without_cookies_warns_and_proceeds(caplog):
    config = JiraSection(host="https://tracker.example.com/")
    session = FakeSession(FakeResponse(NAVIGATOR_HTML))
    fetcher = JiraIssueFetcher(config, session=session, cookie_source=lambda domain: [])

    with caplog.at_level("WARNING"):
        issues = fetcher.fetch()

    assert len(issues) == 2
    assert session.calls[0]["headers"] == {}
    assert session.calls[0]["url"].endswith("issues/?filter=40605")
    assert "0 cookies" in caplog.text


def test_parse_issue_links_keeps_entities_escaped():
    body = (
        '<a class="issue-link" data-issue-key="A1">A1</a>'
        '<a class="issue-link" data-issue-key="A1">Strip &lt;script&gt;\n  tags</a>'
    )
    assert parse_issue_links(body) == [IssueRef("A1", "Strip &lt;script&gt; tags")]


def test_fetch_unauthorized_page_yields_no_issues(caplog):
    login_page = '<html><form id="login-form"></form></html>'
    config = JiraSection(host="https://tracker.example.com/")
    fetcher = JiraIssueFetcher(
        config,
        session=FakeSession(FakeResponse(login_page, status_code=401, reason="Unauthorized")),
        cookie_source=lambda domain: [],
    )

    with caplog.at_level("WARNING"):
        issues = fetcher.fetch()

    assert issues == []
    assert "0 cookies" in caplog.text
    assert "401 Unauthorized" in caplog.text
