"""
Tests for the publish gate and the role capability oracle it consults.
"""

import pytest

from apps.articles.publish_gate import ArticleStatus, PublishDecision, decide
from apps.core.exceptions import ValidationError
from apps.core.permissions import RoleCapabilities


# ============================================================================
# Status parsing
# ============================================================================

class TestArticleStatus:

    @pytest.mark.parametrize('raw,expected', [
        ('draft', ArticleStatus.DRAFT),
        ('Published', ArticleStatus.PUBLISHED),
        (' pending_approval ', ArticleStatus.PENDING_APPROVAL),
        ('archived', ArticleStatus.ARCHIVED),
        ('', ArticleStatus.DRAFT),
        (None, ArticleStatus.DRAFT),
    ])
    def test_from_string(self, raw, expected):
        assert ArticleStatus.from_string(raw) is expected

    def test_unknown_status_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            ArticleStatus.from_string('live')

        assert exc_info.value.field == 'status'
        assert 'published' in exc_info.value.error_details['allowed']


# ============================================================================
# Decisions
# ============================================================================

class TestDecide:

    @pytest.mark.parametrize('role', ['super_admin', 'admin'])
    def test_publishers_publish_directly(self, role):
        assert decide('published', role) == PublishDecision(ArticleStatus.PUBLISHED, False)

    @pytest.mark.parametrize('role', ['editor', 'moderator', None, 'unknown'])
    def test_others_are_routed_to_approval(self, role):
        assert decide('published', role) == PublishDecision(ArticleStatus.PENDING_APPROVAL, True)

    @pytest.mark.parametrize('requested', ['draft', 'archived', 'pending_approval'])
    def test_non_publish_requests_pass_through(self, requested):
        decision = decide(requested, 'editor')

        assert decision.final_status.value == requested
        assert decision.requires_approval is False

    def test_blank_request_is_draft(self):
        assert decide('', 'admin') == PublishDecision(ArticleStatus.DRAFT, False)

    def test_accepts_enum_input(self):
        assert decide(ArticleStatus.PUBLISHED, 'admin').final_status is ArticleStatus.PUBLISHED

    def test_unknown_status_raises(self):
        with pytest.raises(ValidationError):
            decide('scheduled', 'admin')

    def test_explicit_capabilities_override_settings(self):
        capabilities = RoleCapabilities(
            publish_directly=frozenset({'editor'}),
            write_articles=frozenset({'editor'}),
            hard_delete=frozenset(),
        )

        assert decide('published', 'editor', capabilities).requires_approval is False
        assert decide('published', 'admin', capabilities).requires_approval is True

    def test_settings_override_is_picked_up(self, settings):
        settings.NEWSROOM_ROLE_CAPABILITIES = {
            'publish_directly': ['editor'],
            'write_articles': ['editor'],
            'hard_delete': [],
        }

        assert decide('published', 'editor').final_status is ArticleStatus.PUBLISHED
        assert decide('published', 'admin').final_status is ArticleStatus.PENDING_APPROVAL
