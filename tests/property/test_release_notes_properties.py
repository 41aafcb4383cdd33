"""
Property-based tests for release note and approval message formatting.
"""

from hypothesis import given, strategies as st

from rc_release_notifier.formatting.markdown import (
    ReleaseNotesFormatter,
    NO_COMMITS_LINE,
    RELEASE_CHECKLIST,
)
from rc_release_notifier.formatting.slack import SlackMessageFormatter
from rc_release_notifier.models.release import CommitLine


hashes = st.text(alphabet="0123456789abcdef", min_size=7, max_size=12)
messages = st.text(
    alphabet=st.characters(whitelist_categories=('Lu', 'Ll', 'Nd', 'Zs', 'Po')),
    min_size=1,
    max_size=60,
).filter(lambda m: m.strip() == m and m != "")
commit_lists = st.lists(st.builds(CommitLine, hash=hashes, message=messages), max_size=30)
versions = st.from_regex(r"v[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}(-rc[0-9])?", fullmatch=True)


class TestReleaseNotesProperties:
    """Property tests for ReleaseNotesFormatter."""

    @given(commits=commit_lists, tag=versions, version=versions)
    def test_one_line_per_commit_in_order(self, commits, tag, version):
        """
        Property: every commit appears as `- <message> (<hash>)`, in input order.
        """
        notes = ReleaseNotesFormatter().compose_notes(tag, commits, version)
        lines = notes.content.splitlines()

        start = lines.index(f"## Changes since {tag}") + 2
        end = lines.index("## Release Checklist") - 1
        section = lines[start:end]

        if commits:
            assert section == [f"- {c.message} ({c.hash})" for c in commits]
        else:
            assert section == [NO_COMMITS_LINE]

    @given(commits=commit_lists, tag=versions, version=versions)
    def test_checklist_always_present(self, commits, tag, version):
        """
        Property: the four checklist lines close every document, unchanged.
        """
        notes = ReleaseNotesFormatter().compose_notes(tag, commits, version)
        lines = notes.content.splitlines()

        assert lines[0] == f"# Release Candidate: {version}"
        assert lines[-4:] == list(RELEASE_CHECKLIST)
        assert notes.content.endswith("\n")

    @given(commits=commit_lists)
    def test_placeholder_only_without_commits(self, commits):
        """
        Property: the placeholder line appears exactly when there are no commits.
        """
        notes = ReleaseNotesFormatter().compose_notes("v1.0.0", commits, "v1.1.0")
        assert (NO_COMMITS_LINE in notes.content.splitlines()) == (len(commits) == 0)


class TestApprovalMessageProperties:
    """Property tests for SlackMessageFormatter."""

    @given(notes=st.text(min_size=1, max_size=500).filter(lambda s: s.strip()), version=st.text(max_size=40))
    def test_three_buttons_regardless_of_notes(self, notes, version):
        """
        Property: every message carries approve, reject and request-changes in that order.
        """
        message = SlackMessageFormatter().build_message(notes, version)
        actions = [b for b in message.to_payload()['blocks'] if b['type'] == 'actions']

        assert len(actions) == 1
        assert [e['action_id'] for e in actions[0]['elements']] == [
            "release_approve", "release_reject", "release_changes"
        ]
        assert message.notes == notes
