from roster_rank.domain.errors import PlayerNotFound, RosterError, ValidationError
from roster_rank.domain.result import Err, Ok, Result, RosterResult, rejected


class TestOk:
    def test_construction(self) -> None:
        ok: Ok[int] = Ok(42)
        assert ok.value == 42

    def test_equality(self) -> None:
        assert Ok(1) == Ok(1)
        assert Ok(1) != Ok(2)


class TestErr:
    def test_construction(self) -> None:
        err: Err[RosterError] = Err(RosterError("bad"))
        assert err.error.message == "bad"

    def test_error_subtypes_carry_context(self) -> None:
        assert ValidationError("nope", field="points").field == "points"
        assert PlayerNotFound("missing", username="ann").username == "ann"


class TestPatternMatching:
    def test_match_ok(self) -> None:
        result: Result[int, RosterError] = Ok(10)
        match result:
            case Ok(value):
                assert value == 10
            case Err():
                raise AssertionError("Should not match Err")

    def test_match_err(self) -> None:
        result: Result[int, RosterError] = Err(RosterError("fail"))
        match result:
            case Ok():
                raise AssertionError("Should not match Ok")
            case Err(error):
                assert error.message == "fail"


class TestRejected:
    def test_wraps_message_in_roster_error(self) -> None:
        result: RosterResult[int] = rejected("not allowed")
        assert result == Err(RosterError("not allowed"))
