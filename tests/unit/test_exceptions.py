from checkedint.exceptions import (
    CheckedIntException,
    CheckedIntInternalException,
    InvalidLiteral,
    TypeCheckFailure,
)


def test_message():
    assert str(InvalidLiteral("bad literal")) == "bad literal"


def test_hint():
    exc = InvalidLiteral("bad literal", hint="use a wider type")
    assert exc.hint == "use a wider type"
    assert str(exc) == "bad literal\n\n  (hint: use a wider type)"


def test_lazy_hint():
    calls = []

    def hint():
        calls.append(1)
        return "computed"

    exc = InvalidLiteral("bad literal", hint=hint)
    assert calls == []
    assert "(hint: computed)" in str(exc)
    assert calls == [1]


def test_internal_exception():
    exc = TypeCheckFailure("operand must be a typed integer")
    assert isinstance(exc, CheckedIntInternalException)
    assert not isinstance(exc, CheckedIntException)
    assert "internal checkedint error" in str(exc)
