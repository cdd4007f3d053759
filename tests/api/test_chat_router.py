"""
Tests for chat and resume context endpoints.

Verifies request validation and the mapping of service exceptions onto
HTTP status codes.
"""

import uuid
from datetime import datetime, timezone

import pytest

from studybuddy.core.document_processing.models import ResumeReviewContext, RetrievalResult, ReviewSummary
from studybuddy.core.exceptions import (
    DocumentNotFoundError,
    EmbeddingProviderError,
    GenerationError,
    NoContentError,
    StudyBuddyException,
)
from studybuddy.models.chat import ChatHistoryMessage, ChatHistoryResponse, ChatResponse, Citation


class TestChatEndpoint:
    """Test POST /chat."""

    def test_chat_returns_answer_with_citations(self, client, auth_headers, user_id, mock_chat_service) -> None:
        # Arrange
        document_id = uuid.uuid4()
        mock_chat_service.process_chat.return_value = ChatResponse(
            answer="According to page 3: cells divide.",
            citations=[
                Citation(
                    document_id=str(document_id),
                    document_title="Biology 101",
                    page_number=3,
                    snippet="Cells divide by mitosis.",
                    similarity=0.88,
                )
            ],
        )

        # Act
        response = client.post(
            "/api/v1/chat",
            json={"document_ids": [str(document_id)], "message": "How do cells divide?", "top_k": 3},
            headers=auth_headers,
        )

        # Assert
        assert response.status_code == 200
        assert response.json()["citations"][0]["page_number"] == 3
        mock_chat_service.process_chat.assert_awaited_once_with(
            user_id=user_id,
            document_ids=[document_id],
            message="How do cells divide?",
            top_k=3,
        )

    @pytest.mark.parametrize(
        "payload",
        [
            {"document_ids": [], "message": "hi"},
            {"document_ids": ["00000000-0000-0000-0000-000000000001"], "message": ""},
            {"document_ids": ["00000000-0000-0000-0000-000000000001"], "message": "   "},
            {"document_ids": ["00000000-0000-0000-0000-000000000001"], "message": "\n\t "},
            {"document_ids": ["00000000-0000-0000-0000-000000000001"], "message": "hi", "top_k": 0},
        ],
    )
    def test_invalid_request_returns_422(self, client, auth_headers, mock_chat_service, payload) -> None:
        response = client.post("/api/v1/chat", json=payload, headers=auth_headers)

        assert response.status_code == 422
        mock_chat_service.process_chat.assert_not_awaited()

    @pytest.mark.parametrize(
        ("error", "status_code"),
        [
            (DocumentNotFoundError("doc-1"), 404),
            (NoContentError(document_ids=["doc-1"]), 409),
            (EmbeddingProviderError("quota exceeded"), 502),
            (GenerationError("model overloaded"), 502),
            (StudyBuddyException("unexpected"), 500),
        ],
    )
    def test_service_errors_map_to_status_codes(
        self, client, auth_headers, mock_chat_service, error, status_code
    ) -> None:
        mock_chat_service.process_chat.side_effect = error

        response = client.post(
            "/api/v1/chat",
            json={"document_ids": [str(uuid.uuid4())], "message": "hi"},
            headers=auth_headers,
        )

        assert response.status_code == status_code
        assert response.json()["detail"] == error.message

    def test_question_is_stripped_before_service_call(self, client, auth_headers, mock_chat_service) -> None:
        mock_chat_service.process_chat.return_value = ChatResponse(answer="ok", citations=[])

        response = client.post(
            "/api/v1/chat",
            json={"document_ids": [str(uuid.uuid4())], "message": "  What is ATP?  "},
            headers=auth_headers,
        )

        assert response.status_code == 200
        assert mock_chat_service.process_chat.await_args.kwargs["message"] == "What is ATP?"


class TestChatHistoryEndpoints:
    """Test GET and DELETE /chat/history/{document_id}."""

    def test_get_history_returns_messages(self, client, auth_headers, user_id, mock_chat_service) -> None:
        # Arrange
        document_id = uuid.uuid4()
        asked_at = datetime(2026, 3, 2, 14, 0, tzinfo=timezone.utc)
        mock_chat_service.get_history.return_value = ChatHistoryResponse(
            document_id=document_id,
            document_title="Biology 101",
            messages=[
                ChatHistoryMessage(id=uuid.uuid4(), role="user", content="What is ATP?", created_at=asked_at),
                ChatHistoryMessage(
                    id=uuid.uuid4(), role="assistant", content="According to page 4: energy.", created_at=asked_at
                ),
            ],
        )

        # Act
        response = client.get(f"/api/v1/chat/history/{document_id}?limit=10", headers=auth_headers)

        # Assert
        assert response.status_code == 200
        body = response.json()
        assert body["document_title"] == "Biology 101"
        assert [m["role"] for m in body["messages"]] == ["user", "assistant"]
        mock_chat_service.get_history.assert_awaited_once_with(user_id, document_id, limit=10)

    def test_get_history_of_unknown_document_returns_404(self, client, auth_headers, mock_chat_service) -> None:
        mock_chat_service.get_history.side_effect = DocumentNotFoundError("doc-1")

        response = client.get(f"/api/v1/chat/history/{uuid.uuid4()}", headers=auth_headers)

        assert response.status_code == 404

    def test_clear_history_returns_204(self, client, auth_headers, user_id, mock_chat_service) -> None:
        document_id = uuid.uuid4()
        mock_chat_service.clear_history.return_value = 6

        response = client.delete(f"/api/v1/chat/history/{document_id}", headers=auth_headers)

        assert response.status_code == 204
        mock_chat_service.clear_history.assert_awaited_once_with(user_id, document_id)


class TestResumeContextEndpoint:
    """Test GET /resumes/{id}/context."""

    def test_returns_passages_and_latest_review(
        self, client, auth_headers, user_id, mock_resume_service
    ) -> None:
        # Arrange
        document_id = uuid.uuid4()
        mock_resume_service.get_review_context.return_value = ResumeReviewContext(
            chunks=[
                RetrievalResult(
                    text="Built dashboards in Power BI.",
                    page_number=1,
                    document_id=str(document_id),
                    document_title="cv",
                    similarity=0.77,
                )
            ],
            latest_review=ReviewSummary(
                id="review-1",
                document_id=str(document_id),
                user_id=str(user_id),
                reviewed_at=datetime(2026, 3, 1, tzinfo=timezone.utc),
                overall_score=74,
            ),
        )

        # Act
        response = client.get(
            f"/api/v1/resumes/{document_id}/context?query=analytics&top_k=2", headers=auth_headers
        )

        # Assert
        assert response.status_code == 200
        body = response.json()
        assert body["passages"] == [{"page_number": 1, "text": "Built dashboards in Power BI.", "similarity": 0.77}]
        assert body["latest_review"]["overall_score"] == 74
        mock_resume_service.get_review_context.assert_awaited_once_with(
            document_id, user_id, query="analytics", top_k=2
        )

    def test_unindexed_resume_returns_409(self, client, auth_headers, mock_resume_service) -> None:
        mock_resume_service.get_review_context.side_effect = NoContentError(document_ids=["doc-1"])

        response = client.get(f"/api/v1/resumes/{uuid.uuid4()}/context", headers=auth_headers)

        assert response.status_code == 409
