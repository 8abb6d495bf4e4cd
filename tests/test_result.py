"""Tests for Result type (Ok and Err)."""

import copy

import pytest
from hypothesis import given
from hypothesis import strategies as st

from ferrous import Err, Nothing, Ok, Result, Some, UnwrapError, is_result
from tests.strategies import errors, int_results, results


class TestOkCreation:
    """Tests for Ok instantiation and basic properties."""

    def test_ok_creation(self):
        """Ok wraps a value."""
        ok = Ok(42)
        assert ok.value == 42

    def test_ok_with_none(self):
        """Ok can wrap None."""
        ok = Ok(None)
        assert ok.value is None
        assert ok.is_ok()

    def test_ok_is_frozen(self):
        """Ok instances are immutable."""
        ok = Ok(42)
        with pytest.raises(AttributeError):
            ok.value = 100  # type: ignore[misc]


class TestErrCreation:
    """Tests for Err instantiation and basic properties."""

    def test_err_with_string(self):
        """Err can wrap a plain string."""
        err = Err('failed')
        assert err.error == 'failed'

    def test_err_with_exception(self):
        """Err can wrap an exception instance without raising it."""
        exc = ValueError('test')
        err = Err(exc)
        assert err.error is exc

    def test_err_is_frozen(self):
        """Err instances are immutable."""
        err = Err('e')
        with pytest.raises(AttributeError):
            err.error = 'other'  # type: ignore[misc]


class TestResultEquality:
    """Tests for Result equality and hashing."""

    def test_ok_equality(self):
        """Ok instances with same value are equal."""
        assert Ok(42) == Ok(42)
        assert Ok(42) != Ok(43)

    def test_err_equality(self):
        """Err instances with same error are equal."""
        assert Err('error') == Err('error')
        assert Err('a') != Err('b')

    def test_ok_not_equal_to_err(self):
        """Ok and Err are never equal, even with the same payload."""
        assert Ok(1) != Err(1)

    def test_hashable(self):
        """Results are usable in sets."""
        assert {Ok(1), Ok(1), Err('e')} == {Ok(1), Err('e')}


class TestResultQuerying:
    """Tests for is_ok() and is_err() methods."""

    def test_ok_is_ok(self):
        """Ok.is_ok() returns True."""
        assert Ok(-3).is_ok() is True
        assert Ok(-3).is_err() is False

    def test_err_is_err(self):
        """Err.is_err() returns True."""
        assert Err('Some error message').is_ok() is False
        assert Err('Some error message').is_err() is True

    @given(results)
    def test_exactly_one_holds(self, result: Result[object, object]):
        """Exactly one of is_ok()/is_err() is True for any Result."""
        assert result.is_ok() != result.is_err()


class TestResultUnwrap:
    """Tests for unwrap, unwrap_err, unwrap_or, expect and expect_err."""

    def test_ok_unwrap(self):
        """Ok.unwrap() returns the value."""
        assert Ok(2).unwrap() == 2

    def test_err_unwrap_raises(self):
        """Err.unwrap() raises with the error's repr in the message."""
        with pytest.raises(UnwrapError) as exc_info:
            Err('emergency failure').unwrap()
        assert str(exc_info.value) == "called `unwrap()` on an `Err` value: 'emergency failure'"
        assert exc_info.value.container == Err('emergency failure')

    def test_err_unwrap_does_not_raise_the_payload(self):
        """An exception payload is reported, not re-raised."""
        with pytest.raises(UnwrapError, match='ValueError'):
            Err(ValueError('boom')).unwrap()

    def test_ok_unwrap_err_raises(self):
        """Ok.unwrap_err() raises with the value's repr in the message."""
        with pytest.raises(UnwrapError) as exc_info:
            Ok(2).unwrap_err()
        assert str(exc_info.value) == 'called `unwrap_err()` on an `Ok` value: 2'

    def test_err_unwrap_err(self):
        """Err.unwrap_err() returns the error."""
        assert Err('emergency failure').unwrap_err() == 'emergency failure'

    def test_ok_unwrap_or(self):
        """Ok.unwrap_or() ignores the default."""
        assert Ok(9).unwrap_or(2) == 9

    def test_err_unwrap_or(self):
        """Err.unwrap_or() returns the default."""
        assert Err('error').unwrap_or(2) == 2

    def test_err_unwrap_or_callable_receives_error(self):
        """Err.unwrap_or() calls a callable default with the error."""
        assert Err('foo').unwrap_or(len) == 3

    def test_ok_unwrap_or_never_calls(self, counter):
        """Ok.unwrap_or() leaves a callable default unevaluated."""
        fallback = counter(0)
        assert Ok(2).unwrap_or(fallback) == 2
        assert not fallback.called

    def test_ok_expect(self):
        """Ok.expect() returns the value."""
        assert Ok(2).expect('should not fail') == 2

    def test_err_expect_uses_message_verbatim(self):
        """Err.expect() raises with exactly the caller's message."""
        with pytest.raises(UnwrapError) as exc_info:
            Err('emergency failure').expect('Testing expect')
        assert str(exc_info.value) == 'Testing expect'

    def test_ok_expect_err_raises(self):
        """Ok.expect_err() raises with exactly the caller's message."""
        with pytest.raises(UnwrapError) as exc_info:
            Ok(10).expect_err('Testing expect_err')
        assert str(exc_info.value) == 'Testing expect_err'

    def test_err_expect_err(self):
        """Err.expect_err() returns the error."""
        assert Err('Emergency').expect_err('unused') == 'Emergency'

    @given(st.integers(), errors)
    def test_unwrap_or_totality(self, value: int, error: object):
        """unwrap_or never raises, whatever the variant."""
        assert Ok(value).unwrap_or(0) == value
        assert Err(error).unwrap_or(0) == 0


class TestResultMap:
    """Tests for map, map_err and map_or."""

    def test_ok_map(self):
        """Ok.map() transforms the value."""
        assert Ok(2).map(lambda x: x * x) == Ok(4)

    def test_err_map(self):
        """Err.map() returns self without calling the function."""
        err = Err(13)
        assert err.map(lambda x: pytest.fail('should not be called')) is err

    def test_err_map_err_rewrites_error(self):
        """Err.map_err() returns the Result built by op."""
        assert Err(13).map_err(lambda e: Err(f'error code: {e}')) == Err('error code: 13')

    def test_err_map_err_can_recover(self):
        """Err.map_err() may return an Ok."""
        assert Err('e').map_err(lambda _: Ok(0)) == Ok(0)

    def test_ok_map_err(self, counter):
        """Ok.map_err() returns self without calling op."""
        op = counter(Err('x'))
        ok = Ok(2)
        assert ok.map_err(op) is ok
        assert not op.called

    def test_ok_map_or(self):
        """Ok.map_or() applies the function."""
        assert Ok('foo').map_or(42, len) == 3

    def test_err_map_or(self):
        """Err.map_or() returns the default."""
        assert Err('bar').map_or(42, len) == 42

    def test_err_map_or_thunk(self):
        """Err.map_or() calls a callable default with no arguments."""
        assert Err('bar').map_or(lambda: 42, len) == 42

    def test_ok_map_or_never_calls_thunk(self, counter):
        """Ok.map_or() leaves a callable default unevaluated."""
        thunk = counter(0)
        assert Ok('foo').map_or(thunk, len) == 3
        assert not thunk.called


class TestResultAnd:
    """Tests for and_ (monadic bind)."""

    def test_ok_and_static(self):
        """Ok.and_() returns a static Result argument."""
        assert Ok(2).and_(Err('late error')) == Err('late error')
        assert Ok(2).and_(Ok('foo')) == Ok('foo')

    def test_ok_and_function(self):
        """Ok.and_() calls a function with the value."""
        assert Ok(2).and_(lambda x: Ok(x + 1)) == Ok(3)

    def test_err_and_keeps_first_error(self):
        """Err.and_() returns the original error."""
        assert Err('early error').and_(Ok('foo')) == Err('early error')
        assert Err('not a 2').and_(Err('late error')) == Err('not a 2')

    def test_err_and_never_calls(self, counter):
        """Err.and_() short-circuits without calling the function."""
        f = counter(Ok(1))
        assert Err('e').and_(f) == Err('e')
        assert not f.called


class TestResultOr:
    """Tests for or_ (recovery)."""

    def test_truth_table(self):
        """or_() keeps the first Ok."""
        assert Ok(2).or_(Err('late error')) == Ok(2)
        assert Err('early error').or_(Ok(2)) == Ok(2)
        assert Err('not a 2').or_(Err('late error')) == Err('late error')
        assert Ok(2).or_(Ok(100)) == Ok(2)

    def test_err_or_function_receives_error(self):
        """Err.or_() calls a recovery function with the error."""
        assert Err('boom').or_(lambda e: Ok(len(e))) == Ok(4)

    def test_ok_or_never_calls(self, counter):
        """Ok.or_() short-circuits without calling the function."""
        f = counter(Ok(0))
        assert Ok(1).or_(f) == Ok(1)
        assert not f.called


class TestResultMatch:
    """Tests for the match method."""

    def test_ok_match(self):
        """Ok.match() runs the ok arm with the value."""
        assert Ok(3).match(ok=lambda v: v * 2, err=lambda e: 0) == 6

    def test_err_match(self):
        """Err.match() runs the err arm with the error."""
        assert Err('bad').match(ok=lambda v: v, err=lambda e: f'failed: {e}') == 'failed: bad'

    def test_match_with_mapping(self):
        """match() accepts a pattern mapping."""
        pattern = {'ok': str, 'err': str.upper}
        assert Ok(1).match(pattern) == '1'
        assert Err('no').match(pattern) == 'NO'

    def test_match_missing_arm_raises(self):
        """A missing arm for the actual variant raises TypeError."""
        with pytest.raises(TypeError, match="missing the 'err' arm"):
            Err('e').match(ok=str)


class TestResultOk:
    """Tests for ok() and if_let()."""

    def test_ok_ok_returns_unwrapped(self):
        """Ok.ok() returns f(value) directly."""
        assert Ok(2).ok(lambda x: x + 3) == 5

    def test_err_ok_returns_self(self, counter):
        """Err.ok() without a fallback returns the Err itself."""
        f = counter(1)
        err = Err('e')
        assert err.ok(f) is err
        assert not f.called

    def test_err_ok_returns_fallback(self):
        """Err.ok() returns the fallback when one is given."""
        assert Err('e').ok(lambda x: x, 'default') == 'default'

    def test_err_ok_fallback_may_be_none(self):
        """None is a legal fallback."""
        assert Err('e').ok(lambda x: x, None) is None

    def test_ok_if_let(self):
        """Ok.if_let() runs the ok arm."""
        assert Ok(4).if_let(ok=lambda x: x * 2, else_=lambda: 0) == 8

    def test_err_if_let_else(self):
        """Err.if_let() runs the else arm."""
        assert Err('e').if_let(ok=lambda x: x, else_=lambda: 'fallback') == 'fallback'

    def test_err_if_let_without_else(self):
        """Err.if_let() without an else arm returns None."""
        assert Err('e').if_let(ok=lambda x: x) is None


class TestResultPatternMatching:
    """Tests for structural pattern matching."""

    def test_match_statement(self):
        """Results work with the match statement."""

        def describe(result: Result[int, str]) -> str:
            match result:
                case Ok(value):
                    return f'ok {value}'
                case Err(error):
                    return f'err {error}'
            return 'unreachable'

        assert describe(Ok(1)) == 'ok 1'
        assert describe(Err('x')) == 'err x'


class TestResultRepr:
    """Tests for repr and copy."""

    def test_ok_repr(self):
        """Ok has readable repr."""
        assert repr(Ok(42)) == 'Ok(value=42)'

    def test_err_repr(self):
        """Err has readable repr."""
        assert repr(Err('e')) == "Err(error='e')"

    def test_copy(self):
        """Results can be copied."""
        assert copy.copy(Ok(1)) == Ok(1)
        assert copy.copy(Err('e')) == Err('e')


class TestIsResult:
    """Tests for the is_result type guard."""

    def test_variants_are_results(self):
        """Ok and Err are Results."""
        assert is_result(Ok(1))
        assert is_result(Err('e'))

    def test_options_are_not_results(self):
        """Some and Nothing are not Results."""
        assert not is_result(Some(1))
        assert not is_result(Nothing)

    def test_plain_values_are_not_results(self):
        """Plain values are not Results."""
        assert not is_result(None)
        assert not is_result('ok')

    def test_duck_typed_result(self):
        """Anything exposing a callable is_ok counts."""

        class Outcome:
            def is_ok(self):
                return True

        assert is_result(Outcome())

    def test_non_callable_is_ok_is_not_a_result(self):
        """A plain is_ok attribute does not make a Result."""

        class Flagged:
            is_ok = True

        assert not is_result(Flagged())


class TestResultMonadLaws:
    """Property-based tests for monad laws."""

    @given(st.integers())
    def test_left_identity(self, value: int):
        """Left identity: Ok(a).and_(f) == f(a)."""

        def f(x: int) -> Result[int, str]:
            return Ok(x * 2) if x >= 0 else Err('negative')

        assert Ok(value).and_(f) == f(value)

    @given(int_results)
    def test_right_identity(self, m: Result[int, object]):
        """Right identity: m.and_(Ok) == m."""
        assert m.and_(Ok) == m

    @given(int_results)
    def test_associativity(self, m: Result[int, object]):
        """Associativity: m.and_(f).and_(g) == m.and_(lambda x: f(x).and_(g))."""

        def f(x: int) -> Result[int, str]:
            return Ok(x + 1) if x % 2 else Err('even')

        def g(x: int) -> Result[str, str]:
            return Ok(str(x))

        assert m.and_(f).and_(g) == m.and_(lambda x: f(x).and_(g))


class TestResultFunctorLaws:
    """Property-based tests for functor laws."""

    @given(int_results)
    def test_identity(self, m: Result[int, object]):
        """Identity: m.map(id) == m."""
        assert m.map(lambda x: x) == m

    @given(int_results)
    def test_composition(self, m: Result[int, object]):
        """Composition: m.map(f).map(g) == m.map(g . f)."""

        def f(x: int) -> int:
            return x * 3

        def g(x: int) -> str:
            return str(x)

        assert m.map(f).map(g) == m.map(lambda x: g(f(x)))
