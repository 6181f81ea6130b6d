import copy

from enkastela.context import AccessContext


def test_create_context():
    ctx = (
        AccessContext("support")
        .with_caller("user-123")
        .with_reason("customer support ticket #456")
    )
    assert ctx.role == "support"
    assert ctx.caller_id == "user-123"
    assert ctx.reason == "customer support ticket #456"


def test_context_minimal():
    ctx = AccessContext("admin")
    assert ctx.role == "admin"
    assert ctx.caller_id is None
    assert ctx.reason is None


def test_with_caller_only():
    ctx = AccessContext("analyst").with_caller("user-789")
    assert ctx.role == "analyst"
    assert ctx.caller_id == "user-789"
    assert ctx.reason is None


def test_with_reason_only():
    ctx = AccessContext("auditor").with_reason("quarterly audit")
    assert ctx.role == "auditor"
    assert ctx.caller_id is None
    assert ctx.reason == "quarterly audit"


def test_clone_preserves_all_fields():
    ctx = AccessContext("support").with_caller("agent-42").with_reason("escalation")
    cloned = copy.copy(ctx)
    assert cloned.role == ctx.role
    assert cloned.caller_id == ctx.caller_id
    assert cloned.reason == ctx.reason


def test_debug_format_includes_fields():
    ctx = AccessContext("admin").with_caller("root")
    text = repr(ctx)
    assert "admin" in text
    assert "root" in text


def test_with_caller_leaves_original_unchanged():
    base = AccessContext("support")
    derived = base.with_caller("agent-1")
    assert base.caller_id is None
    assert derived.caller_id == "agent-1"