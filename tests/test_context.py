import pytest

from maavalidatejwt.context import (
    Context,
    HelpRequested,
    always_log,
    configure,
    current,
    log,
    parse_args,
    usage,
)


@pytest.fixture
def restore_context():
    saved = current()
    yield
    configure(saved)


def test_defaults():
    context = Context()
    assert context.verbose is False
    assert context.jwt_filename == ""
    assert context.debuggable == -1


def test_parse_filename_and_verbose():
    context = parse_args(["-v", "token.txt"])
    assert context.verbose is True
    assert context.jwt_filename == "token.txt"


def test_parse_long_verbose_case_insensitive():
    assert parse_args(["--VERBOSE", "token.txt"]).verbose is True


def test_parse_value_options():
    context = parse_args(
        ["-MRSIGNER", "aa", "-mrenclave", "bb", "-productid", "cc", "-svn", "dd", "file.jwt"]
    )
    assert context.mrsigner == "aa"
    assert context.mrenclave == "bb"
    assert context.productid == "cc"
    assert context.svn == "dd"
    assert context.jwt_filename == "file.jwt"
    assert context.verbose is False


def test_option_value_keeps_its_case():
    assert parse_args(["-mrsigner", "AbC", "f"]).mrsigner == "AbC"


def test_filename_keeps_its_case():
    assert parse_args(["Token.TXT"]).jwt_filename == "Token.TXT"


def test_isdebuggable_nonempty_sets_one():
    assert parse_args(["-isdebuggable", "true", "f"]).debuggable == 1


def test_isdebuggable_empty_sets_zero():
    assert parse_args(["-isdebuggable", "", "f"]).debuggable == 0


def test_no_arguments_requests_help():
    with pytest.raises(HelpRequested):
        parse_args([])


@pytest.mark.parametrize("flag", ["-h", "--help", "-H"])
def test_help_flag(flag):
    with pytest.raises(HelpRequested) as info:
        parse_args(["token.txt", flag])
    assert str(info.value) == usage()


def test_missing_option_value_requests_help():
    with pytest.raises(HelpRequested):
        parse_args(["token.txt", "-svn"])


def test_second_file_requests_help():
    with pytest.raises(HelpRequested):
        parse_args(["one.txt", "two.txt"])


def test_usage_lists_every_option():
    text = usage()
    for option in ["-mrsigner", "-mrenclave", "-productid", "-svn", "-isdebuggable", "--verbose", "--help"]:
        assert option in text


def test_configure_and_current(restore_context):
    context = Context(verbose=True, jwt_filename="x")
    configure(context)
    assert current() is context


def test_log_verbose(restore_context, capsys):
    configure(Context(verbose=True))
    log("hello")
    assert capsys.readouterr().out == "\t---\thello\n"


def test_log_quiet(restore_context, capsys):
    configure(Context(verbose=False))
    log("hello")
    assert capsys.readouterr().out == ""


def test_always_log_quiet(restore_context, capsys):
    configure(Context(verbose=False))
    always_log("done")
    assert capsys.readouterr().out == "---\tdone\n"


def test_dump_verbose(capsys):
    Context(verbose=True, jwt_filename="token.txt", svn="7").dump()
    out = capsys.readouterr().out
    assert "Arguments for this run:" in out
    assert "\tjwt_filename \t:\ttoken.txt\n" in out
    assert "\tsvn          \t:\t7\n" in out
    assert "\tdebuggable   \t:\t-1\n" in out


def test_dump_quiet(capsys):
    Context(jwt_filename="token.txt").dump()
    assert capsys.readouterr().out == ""