"""Unit tests for age_calculator.agent.create_agent and invoke_with_audit."""

import json
import logging
import re
import uuid
from unittest.mock import MagicMock, patch

import pytest
from strands import Agent

EXPECTED_TOOLS = {
    "get_current_date",
    "calculate_days_between",
    "calculate_age",
    "get_next_birthday",
    "get_zodiac_sign",
}


@pytest.mark.unit
class TestCreateAgent:
    def test_returns_agent_instance(self, agent_runner):
        assert isinstance(agent_runner, Agent)

    def test_agent_registers_every_tool(self, agent_runner):
        assert set(agent_runner.tool_names) == EXPECTED_TOOLS

    def test_bedrock_model_constructed_with_model_arn(self, monkeypatch):
        import age_calculator.agent as agent_module

        monkeypatch.setattr(
            agent_module,
            "settings",
            MagicMock(model_arn="arn:aws:bedrock:us-east-1::foundation-model/sentinel"),
        )
        with patch("age_calculator.agent.BedrockModel") as mock_cls:
            mock_cls.return_value = MagicMock()
            agent_module.create_agent()
        mock_cls.assert_called_once_with(model_id="arn:aws:bedrock:us-east-1::foundation-model/sentinel")

    def test_missing_model_arn_raises_before_touching_bedrock(self, monkeypatch):
        import age_calculator.agent as agent_module

        monkeypatch.setattr(agent_module, "settings", MagicMock(model_arn=None))
        with patch("age_calculator.agent.BedrockModel") as mock_cls:
            with pytest.raises(RuntimeError, match="MODEL_ARN"):
                agent_module.create_agent()
        mock_cls.assert_not_called()

    def test_system_prompt_names_every_tool(self):
        from age_calculator.agent import SYSTEM_PROMPT
        for name in EXPECTED_TOOLS:
            assert name in SYSTEM_PROMPT

    def test_system_prompt_flags_day_approximation(self):
        from age_calculator.agent import SYSTEM_PROMPT
        assert "30-day months" in SYSTEM_PROMPT


@pytest.mark.unit
class TestAgentModuleConstants:
    def test_logger_is_named_after_module(self):
        import age_calculator.agent as agent_module
        assert agent_module.logger.name == "age_calculator.agent"
        assert isinstance(agent_module.logger, logging.Logger)

    def test_audit_logger_is_named_audit(self):
        """audit_logger must use the exact name 'audit' for CloudWatch log routing."""
        import age_calculator.agent as agent_module
        assert agent_module.audit_logger.name == "audit"

    def test_create_agent_return_annotation_is_present(self):
        from age_calculator.agent import create_agent
        assert "return" in create_agent.__annotations__


@pytest.mark.unit
class TestInvokeWithAudit:
    """Audit record contents and the error path."""

    def _audit_record(self, agent, **kwargs) -> dict:
        from age_calculator.agent import invoke_with_audit
        with patch("age_calculator.agent.audit_logger") as mock_audit:
            invoke_with_audit(agent, "some input", **kwargs)
        return json.loads(mock_audit.info.call_args[0][0])

    def test_happy_path_returns_agent_response(self):
        from age_calculator.agent import invoke_with_audit
        agent = MagicMock(return_value="the answer")
        assert invoke_with_audit(agent, "some input") == "the answer"

    def test_happy_path_emits_success_status(self):
        record = self._audit_record(MagicMock(return_value="ok"))
        assert record["status"] == "success"
        assert record["user_id"] == "system"
        assert record["response_latency_ms"] >= 0
        assert record["timestamp"]

    def test_exception_path_emits_error_status_and_reraises(self):
        from age_calculator.agent import invoke_with_audit
        agent = MagicMock(side_effect=RuntimeError("boom"))
        with patch("age_calculator.agent.audit_logger") as mock_audit:
            with pytest.raises(RuntimeError, match="boom"):
                invoke_with_audit(agent, "some input")
        record = json.loads(mock_audit.info.call_args[0][0])
        assert record["status"] == "error"

    def test_caller_supplied_session_id(self):
        record = self._audit_record(MagicMock(return_value="ok"), session_id="my-session-42")
        assert record["session_id"] == "my-session-42"

    def test_auto_generated_session_id_is_valid_uuid(self):
        record = self._audit_record(MagicMock(return_value="ok"))
        uuid.UUID(record["session_id"])

    def test_account_number_is_masked(self, monkeypatch):
        import age_calculator.agent as agent_module
        monkeypatch.setattr(
            agent_module,
            "settings",
            MagicMock(model_arn="arn:aws:bedrock:us-east-1:123456789012:application-inference-profile/x"),
        )
        record = self._audit_record(MagicMock(return_value="ok"))
        assert not re.search(r":\d{12}:", record["model_id"])
        assert ":****:" in record["model_id"]

    def test_first_tool_use_block_is_recorded(self):
        response = MagicMock()
        response.message = {
            "content": [
                {"type": "text", "text": "Let me check."},
                {"type": "tool_use", "name": "calculate_age", "input": {"birth_date": "1990-05-15"}},
            ]
        }
        record = self._audit_record(MagicMock(return_value=response))
        assert record["tool_name"] == "calculate_age"
        assert record["tool_input"] == {"birth_date": "1990-05-15"}
