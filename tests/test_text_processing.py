from utils.text_processing import TextProcessor


def test_normalize_for_matching_replaces_punctuation_with_spaces():
    assert TextProcessor.normalize_for_matching("Peer-Reviewed, by the CDC!") == "peer reviewed  by the cdc "


def test_normalize_for_matching_handles_empty():
    assert TextProcessor.normalize_for_matching("") == ""
    assert TextProcessor.normalize_for_matching(None) == ""


def test_normalize_for_matching_folds_some_non_ascii_letters():
    # Kelvin sign lower-cases to "k"; dotted capital I to "i" plus a combining dot
    assert TextProcessor.normalize_for_matching("\u212aelvin") == "kelvin"
    assert TextProcessor.normalize_for_matching("\u0130d") == "i d"


def test_count_occurrences_is_non_overlapping():
    assert TextProcessor.count_occurrences("aaaa", "aa") == 2
    assert TextProcessor.count_occurrences("whole who", "who") == 2
    assert TextProcessor.count_occurrences("", "who") == 0


def test_count_excessive_punctuation_counts_runs():
    text = "Wow!!! Really??? No!! What?!?! Stop!!!!!!"

    assert TextProcessor.count_excessive_punctuation(text) == 3


def test_count_caps_words_requires_three_letters_and_word_boundaries():
    text = "The CDC and WHO say NO to COVID19 and FAKE-NEWS"

    # CDC, WHO, FAKE, NEWS; NO is too short and COVID19 is not all letters
    assert TextProcessor.count_caps_words(text) == 4


def test_count_words_splits_on_any_whitespace():
    assert TextProcessor.count_words("one  two\tthree\nfour ") == 4
    assert TextProcessor.count_words("   ") == 0


def test_truncate_text_keeps_total_width():
    text = "x" * 100

    truncated = TextProcessor.truncate_text(text, 80)

    assert len(truncated) == 80
    assert truncated.endswith("...")
    assert TextProcessor.truncate_text("short", 80) == "short"
    assert TextProcessor.truncate_text(None) == ""


def test_to_utf8_drops_lone_surrogates():
    assert TextProcessor.to_utf8("ok\udcff") == "ok"
