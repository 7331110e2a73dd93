"""Tests for error classification."""

import pickle

import pytest

from dagger_client.core.errors import (
    DaggerError,
    ExecError,
    GraphQLError,
    classify_error,
)


def exec_error_entry(**extensions):
    return {
        "message": "process \"echo\" did not complete successfully: exit code: 1",
        "path": ["container", "from", "withExec", "stdout"],
        "extensions": {"_type": "EXEC_ERROR", **extensions},
    }


class TestClassifyError:
    """Tests for classify_error."""

    def test_non_graphql_error_passes_through(self):
        """Test errors other than GraphQLError are not classified."""
        assert classify_error(RuntimeError("boom")) is None

    def test_no_extensions_passes_through(self):
        """Test an entry without extensions is left alone."""
        err = GraphQLError("boom", [{"message": "boom"}])
        assert classify_error(err) is None

    def test_extensions_not_a_map(self):
        """Test extensions that are not an object are ignored."""
        err = GraphQLError("boom", [{"message": "boom", "extensions": ["EXEC_ERROR"]}])
        assert classify_error(err) is None

    def test_missing_type(self):
        err = GraphQLError("boom", [{"message": "boom", "extensions": {"exitCode": 1}}])
        assert classify_error(err) is None

    def test_type_not_a_string(self):
        err = GraphQLError("boom", [{"message": "boom", "extensions": {"_type": 42}}])
        assert classify_error(err) is None

    def test_unknown_type(self):
        """Test only EXEC_ERROR is reclassified."""
        err = GraphQLError("boom", [{"message": "boom", "extensions": {"_type": "OTHER"}}])
        assert classify_error(err) is None

    def test_exec_error(self):
        """Test every extension field is carried onto ExecError."""
        err = GraphQLError("failed", [
            exec_error_entry(cmd=["a", "b"], exitCode=1, stdout="out", stderr="err"),
        ])
        exec_err = classify_error(err)

        assert isinstance(exec_err, ExecError)
        assert isinstance(exec_err, DaggerError)
        assert exec_err.cmd == ["a", "b"]
        assert exec_err.exit_code == 1
        assert exec_err.stdout == "out"
        assert exec_err.stderr == "err"
        assert exec_err.original is err

        text = str(exec_err)
        assert "exit code: 1" in text
        assert "Stdout:\nout" in text
        assert "Stderr:\nerr" in text

    def test_float_exit_code(self):
        """JSON numbers may decode as floats."""
        exec_err = classify_error(GraphQLError("failed", [exec_error_entry(exitCode=127.0)]))
        assert exec_err.exit_code == 127

    @pytest.mark.parametrize("extensions", [
        {"exitCode": "1"},
        {"exitCode": True},
        {"cmd": "echo hi"},
        {"cmd": ["echo", 1]},
        {"stdout": 5, "stderr": ["x"]},
    ])
    def test_malformed_fields_are_ignored(self, extensions):
        """Test fields of the wrong type fall back to their defaults."""
        exec_err = classify_error(GraphQLError("failed", [exec_error_entry(**extensions)]))

        assert isinstance(exec_err, ExecError)
        assert exec_err.exit_code == 0
        assert exec_err.cmd == []
        assert exec_err.stdout == ""
        assert exec_err.stderr == ""

    def test_first_exec_error_wins(self):
        """Test the first EXEC_ERROR entry is classified."""
        err = GraphQLError("failed", [
            {"message": "unrelated"},
            exec_error_entry(exitCode=2, stdout="first"),
            exec_error_entry(exitCode=3, stdout="second"),
        ])
        exec_err = classify_error(err)
        assert exec_err.exit_code == 2
        assert exec_err.stdout == "first"

    def test_message_falls_back_to_error_message(self):
        entry = exec_error_entry()
        del entry["message"]
        exec_err = classify_error(GraphQLError("joined message", [entry]))
        assert exec_err.message == "joined message"


class TestExecErrorStr:
    """Tests for ExecError formatting."""

    def test_blank_output_suppressed(self):
        """Test whitespace-only output adds no section."""
        err = ExecError(GraphQLError("m", []), "failed", stdout="  \n", stderr="")
        assert str(err) == "failed"

    def test_only_stderr(self):
        """Test the Stderr section alone."""
        err = ExecError(GraphQLError("m", []), "failed", stderr="oops")
        assert str(err) == "failed\nStderr:\noops"

    def test_only_stdout(self):
        err = ExecError(GraphQLError("m", []), "failed", stdout="hello\n")
        assert str(err) == "failed\nStdout:\nhello\n"


class TestGraphQLError:
    """Tests for GraphQLError."""

    def test_extensions_of_first_error(self):
        """Test extensions come from the first entry."""
        err = GraphQLError("m", [{"message": "m", "extensions": {"code": "X"}}, {"message": "n"}])
        assert err.extensions == {"code": "X"}

    def test_no_errors(self):
        assert GraphQLError("m", []).extensions == {}

    def test_entry_not_a_map(self):
        """Test extensions of a malformed entry are empty."""
        assert GraphQLError("boom", ["boom"]).extensions == {}
        assert GraphQLError("boom", [None, {"extensions": {"a": 1}}]).extensions == {}

    def test_pickle(self):
        """Test GraphQLError survives a pickle round trip."""
        err = GraphQLError("m", [{"message": "m", "extensions": {"code": "X"}}])

        copy = pickle.loads(pickle.dumps(err))

        assert str(copy) == "m"
        assert copy.errors == err.errors
        assert copy.extensions == {"code": "X"}


class TestExecErrorPickle:
    """Tests for passing ExecError across process boundaries."""

    def test_round_trip(self):
        """Test every field survives pickling."""
        original = GraphQLError("failed", [exec_error_entry(exitCode=2)])
        err = ExecError(original, "failed", cmd=["make"], exit_code=2, stdout="o", stderr="e")

        copy = pickle.loads(pickle.dumps(err))

        assert isinstance(copy, ExecError)
        assert str(copy) == str(err)
        assert copy.cmd == ["make"]
        assert copy.exit_code == 2
        assert copy.stdout == "o"
        assert copy.stderr == "e"
        assert copy.original.errors == original.errors

    def test_classified_error_round_trip(self):
        err = classify_error(GraphQLError("failed", [exec_error_entry(exitCode=1, stderr="x")]))
        copy = pickle.loads(pickle.dumps(err))
        assert copy.exit_code == 1
        assert copy.stderr == "x"
