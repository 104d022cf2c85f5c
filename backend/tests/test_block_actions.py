"""
Tests for block actions.
"""
import json

import pytest

from newsletter_writer.models import NewsletterBlock, NewsletterIssue


@pytest.fixture
def block_a(call_action, headers_a, issue_a):
    response = call_action(
        "createBlock",
        {
            "issueId": issue_a["id"],
            "blockType": "cta",
            "heading": "Try it",
            "body": "Grab the beta",
            "ctaLabel": "Sign up",
            "ctaUrl": "https://example.com/beta",
        },
        headers_a,
    )
    assert response.status_code == 200
    return response.json()["data"]["block"]


class TestCreateBlock:

    def test_order_index_defaults_to_one(self, call_action, headers_a, issue_a):
        block = call_action("createBlock", {"issueId": issue_a["id"]}, headers_a).json()["data"]["block"]

        assert block["orderIndex"] == 1
        assert block["issueId"] == issue_a["id"]
        assert "updatedAt" not in block

    def test_order_index_stored_as_given(self, call_action, headers_a, issue_a):
        first = call_action("createBlock", {"issueId": issue_a["id"], "orderIndex": 7}, headers_a).json()
        second = call_action("createBlock", {"issueId": issue_a["id"], "orderIndex": 7}, headers_a).json()

        assert first["data"]["block"]["orderIndex"] == 7
        assert second["data"]["block"]["orderIndex"] == 7

    def test_meta_json_is_opaque(self, call_action, headers_a, issue_a):
        not_json = "{this is not json"
        block = call_action(
            "createBlock",
            {"issueId": issue_a["id"], "metaJson": not_json},
            headers_a,
        ).json()["data"]["block"]
        assert block["metaJson"] == not_json

        encoded = json.dumps({"align": "center"})
        block = call_action(
            "createBlock",
            {"issueId": issue_a["id"], "metaJson": encoded},
            headers_a,
        ).json()["data"]["block"]
        assert block["metaJson"] == encoded

    def test_order_index_must_be_integer(self, call_action, headers_a, issue_a):
        response = call_action("createBlock", {"issueId": issue_a["id"], "orderIndex": 1.5}, headers_a)
        assert response.status_code == 400

    def test_create_in_foreign_issue(self, call_action, headers_b, issue_a, db):
        response = call_action("createBlock", {"issueId": issue_a["id"]}, headers_b)

        assert response.status_code == 404
        assert response.json()["error"]["message"] == "Newsletter issue not found."
        assert db.query(NewsletterBlock).count() == 0

    def test_create_checks_campaign_link(self, call_action, headers_a, issue_a, user_b, db):
        """An issue whose campaign changed hands is no longer reachable."""
        issue = db.query(NewsletterIssue).filter(NewsletterIssue.id == issue_a["id"]).one()
        issue.campaign.user_id = user_b.id
        db.commit()

        response = call_action("createBlock", {"issueId": issue_a["id"]}, headers_a)

        assert response.status_code == 404
        assert response.json()["error"]["message"] == "Campaign not found."


class TestUpdateBlock:

    def test_partial_update(self, call_action, headers_a, issue_a, block_a):
        response = call_action(
            "updateBlock",
            {"id": block_a["id"], "issueId": issue_a["id"], "heading": "Hi"},
            headers_a,
        )

        assert response.status_code == 200
        updated = response.json()["data"]["block"]
        assert updated["heading"] == "Hi"
        for key in ("body", "ctaLabel", "ctaUrl", "blockType", "orderIndex", "createdAt"):
            assert updated[key] == block_a[key]

    def test_update_order_index(self, call_action, headers_a, issue_a, block_a):
        updated = call_action(
            "updateBlock",
            {"id": block_a["id"], "issueId": issue_a["id"], "orderIndex": 4},
            headers_a,
        ).json()["data"]["block"]
        assert updated["orderIndex"] == 4

    def test_null_order_index_is_rejected(self, call_action, headers_a, issue_a, block_a):
        response = call_action(
            "updateBlock",
            {"id": block_a["id"], "issueId": issue_a["id"], "orderIndex": None},
            headers_a,
        )
        assert response.status_code == 400

    def test_update_without_fields(self, call_action, headers_a, issue_a, block_a):
        response = call_action("updateBlock", {"id": block_a["id"], "issueId": issue_a["id"]}, headers_a)

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "BAD_REQUEST"

    def test_update_block_from_other_issue(self, call_action, headers_a, campaign_a, issue_a, block_a):
        other_issue = call_action(
            "createIssue",
            {"campaignId": campaign_a["id"], "subjectLine": "Issue 2"},
            headers_a,
        ).json()["data"]["issue"]

        response = call_action(
            "updateBlock",
            {"id": block_a["id"], "issueId": other_issue["id"], "heading": "Moved?"},
            headers_a,
        )

        assert response.status_code == 404
        assert response.json()["error"]["message"] == "Block not found."

    def test_update_by_other_user(self, call_action, headers_b, issue_a, block_a):
        response = call_action(
            "updateBlock",
            {"id": block_a["id"], "issueId": issue_a["id"], "heading": "Mine now"},
            headers_b,
        )
        assert response.status_code == 404


class TestDeleteBlock:

    def test_delete_block(self, call_action, headers_a, issue_a, block_a, db):
        response = call_action("deleteBlock", {"id": block_a["id"], "issueId": issue_a["id"]}, headers_a)

        assert response.status_code == 200
        assert response.json() == {"success": True}
        assert db.query(NewsletterBlock).count() == 0

    def test_delete_already_deleted_block(self, call_action, headers_a, issue_a, block_a):
        call_action("deleteBlock", {"id": block_a["id"], "issueId": issue_a["id"]}, headers_a)

        response = call_action("deleteBlock", {"id": block_a["id"], "issueId": issue_a["id"]}, headers_a)

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "NOT_FOUND"

    def test_delete_by_other_user(self, call_action, headers_b, issue_a, block_a, db):
        response = call_action("deleteBlock", {"id": block_a["id"], "issueId": issue_a["id"]}, headers_b)

        assert response.status_code == 404
        assert db.query(NewsletterBlock).count() == 1

    def test_delete_requires_issue_id(self, call_action, headers_a, block_a):
        response = call_action("deleteBlock", {"id": block_a["id"]}, headers_a)
        assert response.status_code == 400


class TestListBlocks:

    def test_list_in_order(self, call_action, headers_a, issue_a):
        for order_index in (2, 1, 3):
            call_action(
                "createBlock",
                {"issueId": issue_a["id"], "orderIndex": order_index, "heading": f"#{order_index}"},
                headers_a,
            )

        data = call_action("listBlocks", {"issueId": issue_a["id"]}, headers_a).json()["data"]

        assert data["total"] == 3
        assert [item["orderIndex"] for item in data["items"]] == [1, 2, 3]

    def test_list_foreign_issue(self, call_action, headers_b, issue_a):
        response = call_action("listBlocks", {"issueId": issue_a["id"]}, headers_b)
        assert response.status_code == 404

    def test_list_unknown_issue(self, call_action, headers_a):
        response = call_action("listBlocks", {"issueId": "missing"}, headers_a)

        assert response.status_code == 404
        assert response.json()["error"]["message"] == "Newsletter issue not found."
