import pytest

from metar_decoder.decoding import TokenClassifier, TokenCategory
from metar_decoder.lookup import LookupTables
from metar_decoder.utils import section_separator


@pytest.fixture
def classifier(tables):
    return TokenClassifier(tables)


class TestClassify:

    @pytest.mark.parametrize("token,category", [
        ("34015KT", TokenCategory.WIND),
        ("VRB03MPS", TokenCategory.WIND),
        ("24015G25KT", TokenCategory.WIND),
        ("290V360", TokenCategory.WIND_VARIATION),
        ("9999", TokenCategory.VISIBILITY),
        ("3/4SM", TokenCategory.VISIBILITY),
        ("R04R/P1500N", TokenCategory.RUNWAY_VISUAL_RANGE),
        ("R22/1000V1500FT/U", TokenCategory.RUNWAY_VISUAL_RANGE),
        ("VV005", TokenCategory.VERTICAL_VISIBILITY),
        ("+SHRA", TokenCategory.WEATHER_PHENOMENON),
        ("RETS", TokenCategory.WEATHER_PHENOMENON),
        ("BKN030CB", TokenCategory.CLOUD_LAYER),
        ("M05/M02", TokenCategory.TEMPERATURE),
        ("/////", TokenCategory.TEMPERATURE),
        ("05/", TokenCategory.TEMPERATURE),
        ("Q1002", TokenCategory.PRESSURE),
        ("A////", TokenCategory.PRESSURE),
        ("WS ALL RWY", TokenCategory.WINDSHEAR),
        ("WS RWY24L", TokenCategory.WINDSHEAR),
        ("SLP134", TokenCategory.SEA_LEVEL_PRESSURE),
        ("8849//91", TokenCategory.RUNWAY_STATE_GROUP),
        ("24CLRD95", TokenCategory.RUNWAY_STATE_GROUP),
        ("CAVOK", TokenCategory.WEATHER_PHENOMENON),
        ("FOO", TokenCategory.WEATHER_PHENOMENON),
        ("X", TokenCategory.DICTIONARY_WORD),
        ("12345", TokenCategory.UNKNOWN),
        ("R//", TokenCategory.UNKNOWN),
    ])
    def test_single_tokens(self, classifier, token, category):
        classified = classifier.classify([token], 0)
        assert classified.category == category
        assert classified.text == token
        assert classified.consumed == 1

    def test_wind_wins_over_dictionary_word(self):
        tables = LookupTables.from_mapping({'34015KT': 'a dictionary entry'})
        classifier = TokenClassifier(tables)
        assert classifier.classify(["34015KT"], 0).category == TokenCategory.WIND

    def test_two_token_visibility_is_merged(self, classifier):
        classified = classifier.classify(["1", "1/2SM", "Q1002"], 0)
        assert classified.category == TokenCategory.VISIBILITY
        assert classified.text == "1 1/2SM"
        assert classified.consumed == 2

    def test_number_without_statute_miles_is_not_merged(self, classifier):
        classified = classifier.classify(["1", "Q1002"], 0)
        assert classified.category == TokenCategory.UNKNOWN
        assert classified.consumed == 1


class TestDecode:

    def test_lines_in_token_order(self, classifier):
        tokens = ["202004251330", "METAR", "LZKZ", "34015KT", "CAVOK", "13/06", "Q1002", "NOSIG"]
        lines = list(classifier.decode(tokens))

        assert lines[0] == "Wind: The wind blows from 340 degrees at 15 knots (27.78 km/h)."
        assert lines[1] == ("Weather: CAVOK = Ceiling and visibility OK, no significant weather "
                            "and no clouds below 5000 feet.")
        assert lines[2] == "Temperature: 13 degrees.\nDewpoint   : 06 degrees."
        assert lines[3] == "Sea-level pressure (QNH): 1002 hPa (29.59 inches)."
        assert lines[4] == "Weather: NOSIG = No significant change expected in the next 2 hours."
        assert len(lines) == 5

    def test_merged_visibility_consumes_both_tokens(self, classifier):
        lines = list(classifier.decode(["1", "1/2SM", "A2992"], start=0))
        assert lines == [
            "Maximum horizontal visibility: 1 1/2 statute miles.",
            "Sea-level pressure (QNH): 29.92 inches (1013.21 hPa).",
        ]

    def test_unknown_words_are_reported_whatever_their_length(self, classifier):
        lines = list(classifier.decode(["FOO", "BLAH", "ABCDE", "ABCDEF", "CLRD", "12345", "9999"], start=0))
        assert lines == [
            "FOO: Unknown token.",
            "BLAH: Unknown token.",
            "ABCDE: Unknown token.",
            "ABCDEF: Unknown token.",
            "Weather: CLRD = Cleared.",
            "12345: Unknown token.",
            "Visibility: The visibility is 10 km or more.",
        ]

    def test_single_letters_missing_from_the_dictionary_are_skipped(self, classifier):
        assert list(classifier.decode(["X", "9999"], start=0)) == [
            "Visibility: The visibility is 10 km or more.",
        ]

    def test_single_letter_dictionary_word(self):
        classifier = TokenClassifier(LookupTables.from_mapping({'X': 'a single letter entry'}))
        assert list(classifier.decode(["X"], start=0)) == ["X: a single letter entry."]

    def test_token_print(self, tables):
        classifier = TokenClassifier(tables, token_print=True)
        lines = list(classifier.decode(["9999"], start=0))
        assert lines == [f"{section_separator('9999')}\nVisibility: The visibility is 10 km or more."]
