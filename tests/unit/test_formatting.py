"""
Unit tests for the markdown and Slack formatters.
"""

import pytest

from rc_release_notifier.formatting.markdown import (
    ReleaseNotesFormatter,
    NO_COMMITS_LINE,
    RELEASE_CHECKLIST,
)
from rc_release_notifier.formatting.slack import SlackMessageFormatter, APPROVAL_PROMPT
from rc_release_notifier.models.message import MessageContext
from rc_release_notifier.models.release import CommitLine


class TestReleaseNotesFormatter:
    """Unit tests for ReleaseNotesFormatter."""

    def setup_method(self):
        self.formatter = ReleaseNotesFormatter()

    def test_commits_since_tag(self):
        commits = [CommitLine.parse("abc123 fix bug"), CommitLine.parse("def456 add feature")]

        notes = self.formatter.compose_notes("v1.2.0", commits, "v1.3.0-rc1")

        assert notes.content.startswith("# Release Candidate: v1.3.0-rc1\n")
        assert "## Changes since v1.2.0" in notes.content
        lines = notes.content.splitlines()
        assert lines.index("- fix bug (abc123)") < lines.index("- add feature (def456)")
        assert NO_COMMITS_LINE not in lines

    def test_no_tag_no_commits(self):
        notes = self.formatter.compose_notes("v0.0.0", [], "v1.0.0")

        assert notes.content.startswith("# Release Candidate: v1.0.0\n")
        assert "## Changes since v0.0.0" in notes.content
        assert notes.content.splitlines().count(NO_COMMITS_LINE) == 1
        assert not notes.has_commits

    def test_exact_document(self):
        notes = self.formatter.compose_notes("v1.2.0", [CommitLine("abc123", "fix bug")], "v1.3.0")

        assert notes.content == (
            "# Release Candidate: v1.3.0\n"
            "\n"
            "## Changes since v1.2.0\n"
            "\n"
            "- fix bug (abc123)\n"
            "\n"
            "## Release Checklist\n"
            "- [ ] Code review completed\n"
            "- [ ] Tests passing\n"
            "- [ ] Documentation updated\n"
            "- [ ] Ready for deployment\n"
        )

    def test_checklist_always_last(self):
        notes = self.formatter.compose_notes("v2.0.0", [CommitLine("aaa111", "x")], "v2.1.0")
        assert notes.content.splitlines()[-4:] == list(RELEASE_CHECKLIST)

    def test_notes_record_inputs(self):
        commits = [CommitLine("abc123", "fix bug")]
        notes = self.formatter.compose_notes("v1.2.0", commits, "v1.3.0")

        assert notes.version == "v1.3.0"
        assert notes.previous_tag == "v1.2.0"
        assert notes.commits == tuple(commits)


class TestSlackMessageFormatter:
    """Unit tests for SlackMessageFormatter."""

    NOTES = "# Release Candidate: v1.3.0\n\n## Changes since v1.2.0\n\n- fix bug (abc123)\n"

    def test_buttons_fixed_order(self):
        message = SlackMessageFormatter().build_message(self.NOTES, "v1.3.0")

        assert message.action_ids == ["release_approve", "release_reject", "release_changes"]
        assert [b.style for b in message.buttons] == ["primary", "danger", None]
        assert [b.value for b in message.buttons] == ["approve", "reject", "changes"]

    def test_blocks(self):
        context = MessageContext(repository="acme/app", run_id="123456")
        message = SlackMessageFormatter(channel="#qa").build_message(self.NOTES, "v1.3.0", context)
        payload = message.to_payload()
        blocks = payload['blocks']

        assert payload['channel'] == "#qa"
        assert blocks[0]['text']['text'] == "🚀 Release Approval Request: v1.3.0"
        assert blocks[1]['text'] == {'type': 'mrkdwn', 'text': self.NOTES}
        assert blocks[2] == {'type': 'divider'}
        assert blocks[3]['text']['text'] == APPROVAL_PROMPT
        assert [e['action_id'] for e in blocks[4]['elements']] == [
            "release_approve", "release_reject", "release_changes"
        ]
        assert blocks[5]['elements'][0]['text'] == "Repository: acme/app | Run: 123456"

    def test_default_channel(self):
        message = SlackMessageFormatter().build_message(self.NOTES, "v1.3.0")
        assert message.channel == "#releases"

    def test_empty_notes_rejected(self):
        with pytest.raises(ValueError):
            SlackMessageFormatter().build_message("", "v1.3.0")
