from conftest import make_entry
from support_assistant.services.chat.suggestions import DEFAULT_SUGGESTIONS, SuggestionGenerator


def test_matching_questions_come_first_in_entry_order(scooter_faq) -> None:
    suggestions = SuggestionGenerator(limit=3).generate("how long is the battery warranty", scooter_faq)

    assert suggestions == [
        "What is the return policy?",
        "How long is the warranty?",
        "What is the top speed of the scooter?",
    ]


def test_pads_with_generic_questions() -> None:
    entries = [make_entry("faq-1", "Do you sell helmets for kids?")]
    suggestions = SuggestionGenerator(limit=3).generate("helmets", entries)

    assert suggestions == ["Do you sell helmets for kids?", DEFAULT_SUGGESTIONS[0], DEFAULT_SUGGESTIONS[1]]


def test_empty_query_returns_generic_questions(scooter_faq) -> None:
    assert SuggestionGenerator(limit=3).generate("", scooter_faq) == list(DEFAULT_SUGGESTIONS)


def test_never_duplicates_or_exceeds_limit() -> None:
    entries = [
        make_entry("faq-1", "How do I track my order?"),
        make_entry("faq-2", "How do I track my order?"),
    ]
    suggestions = SuggestionGenerator(limit=3).generate("track", entries)

    assert suggestions == list(DEFAULT_SUGGESTIONS)
    assert len(set(suggestions)) == len(suggestions) <= 3


def test_stop_words_still_link_questions(scooter_faq) -> None:
    # No stop-word filtering here: "how" alone is enough to pull a question in.
    suggestions = SuggestionGenerator(limit=3).generate("how", scooter_faq)
    assert suggestions[:2] == ["How long is the warranty?", "How far can I ride on one charge?"]


def test_limit_is_capped_at_three(scooter_faq) -> None:
    generator = SuggestionGenerator(limit=10)
    assert generator.limit == 3
    assert len(generator.generate("how", scooter_faq)) == 3
