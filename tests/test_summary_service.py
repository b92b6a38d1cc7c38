from src.services.summary_service import EMPTY_SUMMARY, SummaryService


def test_blank_description_returns_sentinel():
    assert SummaryService.summarize("") == EMPTY_SUMMARY
    assert SummaryService.summarize("   \n\t ") == EMPTY_SUMMARY
    assert SummaryService.summarize(None) == EMPTY_SUMMARY


def test_filler_removed_and_first_sentence_kept():
    summary = SummaryService.summarize("Please fix this urgent leak immediately.")
    assert summary == "Fix this urgent leak immediately."


def test_only_first_sentence_is_kept():
    text = "The hostel wifi drops every evening. It has been like this for weeks!"
    assert SummaryService.summarize(text) == "The hostel wifi drops every evening."


def test_whitespace_and_line_breaks_collapse():
    text = "the   mess food\n\nwas served  cold   again today"
    assert SummaryService.summarize(text) == "The mess food was served cold again today"


def test_filler_words_are_whole_word_only():
    text = "The adjustable chair is really broken and wobbly"
    assert SummaryService.summarize(text) == "The adjustable chair is broken and wobbly"


def test_long_text_truncated_to_twenty_words():
    words = [f"word{i}" for i in range(30)]
    summary = SummaryService.summarize(" ".join(words))
    assert summary == "Word0 " + " ".join(words[1:20]) + "..."


def test_short_text_falls_back_to_original_description():
    # After filler removal only "Fix it." is left, so the original is used.
    assert SummaryService.summarize("please just kindly fix it. Thanks") == "Please just kindly fix it. Thanks"


def test_short_fallback_adds_ellipsis_only_past_twenty_five_words():
    tail = " ".join(f"w{i}" for i in range(30))
    summary = SummaryService.summarize(f"Broken. {tail}")
    assert summary.endswith("...")
    assert len(summary[:-3].split()) == 25

    assert not SummaryService.summarize("Broken. two three").endswith("...")


def test_result_starts_with_uppercase():
    for text in ["water leak", "  lights off in corridor  ", "please help"]:
        summary = SummaryService.summarize(text)
        assert summary
        assert summary[0].isupper()
