import pytest

from mediatype.exceptions import MalformedParameters
from mediatype.parameters import parse_parameters, split_parameters, unquote


def describe_parse_parameters():

    @pytest.mark.parametrize("block", [None, ""])
    def returns_none_when_block_is_absent(block: str | None):
        assert parse_parameters(block) is None

    def keeps_last_value_of_duplicate_keys():
        assert parse_parameters("; charset=UTF-8; charset=ASCII") == {"charset": "ASCII"}

    def treats_keys_as_case_sensitive():
        assert parse_parameters("; Charset=a; charset=b") == {"Charset": "a", "charset": "b"}

    def trims_whitespace_around_segments_and_equals():
        assert parse_parameters(";  a = 1 ;b=2  ") == {"a": "1", "b": "2"}

    def accepts_block_without_leading_semicolon():
        assert parse_parameters("a=1;b=2") == {"a": "1", "b": "2"}

    def does_not_split_inside_quoted_values():
        assert parse_parameters('; boundary="a;b=c"; x=1') == {"boundary": '"a;b=c"', "x": "1"}

    def honours_escaped_quotes_inside_quoted_values():
        assert parse_parameters(r'; title="say \"hi\"; ok"') == {"title": r'"say \"hi\"; ok"'}

    def splits_on_first_equals_only():
        assert parse_parameters("; a=b=c") == {"a": "b=c"}

    def describe_when_malformed():

        @pytest.mark.parametrize(
            ("block", "reason"),
            [
                (";", "empty parameter"),
                ("; a=1;", "empty parameter"),
                ("; a=1;; b=2", "empty parameter"),
                ("; a", "parameter 'a' has no '='"),
                ("; =1", "parameter '=1' has no name"),
                ("; a=", "parameter 'a' has no value"),
                ('; a="x', "unterminated quoted string"),
            ],
        )
        def raises_malformed_parameters(block: str, reason: str):
            # *** ACT ***
            with pytest.raises(MalformedParameters) as excinfo:
                parse_parameters(block)

            # *** ASSERT ***
            assert excinfo.value.reason == reason
            assert excinfo.value.parameters == block
            assert excinfo.value.context == {"parameters": block, "reason": reason}


def describe_split_parameters():

    def preserves_order_and_duplicates():
        assert split_parameters("; a=1; b=2; a=3") == [("a", "1"), ("b", "2"), ("a", "3")]


def describe_unquote():

    def removes_quotes():
        assert unquote('"UTF-8"') == "UTF-8"

    def removes_escapes():
        assert unquote(r'"say \"hi\""') == 'say "hi"'

    @pytest.mark.parametrize("value", ["plain", '"', '"half', ""])
    def leaves_unquoted_values_unchanged(value: str):
        assert unquote(value) == value
