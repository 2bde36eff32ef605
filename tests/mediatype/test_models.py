import pytest

from mediatype.models import MediaTypeParts


def describe_media_type_parts():

    @pytest.mark.parametrize("name", ["type", "subtype"])
    def raises_when_required_part_is_empty(name: str):
        kwargs = {"type": "text", "subtype": "plain", name: ""}
        with pytest.raises(ValueError) as excinfo:
            MediaTypeParts(**kwargs)
        assert str(excinfo.value) == f"'{name}' must not be empty"

    def copies_parameters():
        parameters = {"charset": "UTF-8"}
        parts = MediaTypeParts(type="text", subtype="plain", parameters=parameters)
        parameters["charset"] = "ASCII"
        assert parts.parameters == {"charset": "UTF-8"}

    def does_not_allow_parameters_to_be_changed():
        # *** ARRANGE ***
        parts = MediaTypeParts(type="text", subtype="plain", parameters={"charset": "UTF-8"})

        # *** ACT ***
        with pytest.raises(TypeError):
            parts.parameters["charset"] = "ASCII"  # type: ignore[index]

        # *** ASSERT ***
        assert parts.parameters == {"charset": "UTF-8"}

    def compares_equal_with_same_parameters():
        first = MediaTypeParts(type="text", subtype="plain", parameters={"a": "1"})
        second = MediaTypeParts(type="text", subtype="plain", parameters={"a": "1"})
        assert first == second
        assert first != MediaTypeParts(type="text", subtype="plain", parameters={"a": "2"})

    def describe_str():

        def formats_minimal_media_type():
            assert str(MediaTypeParts(type="text", subtype="plain")) == "text/plain"

        def formats_every_part():
            parts = MediaTypeParts(
                type="application", tree="vnd", subtype="api", suffix="json", parameters={"ext": "bulk", "v": "1"},
            )
            assert str(parts) == "application/vnd.api+json; ext=bulk; v=1"
