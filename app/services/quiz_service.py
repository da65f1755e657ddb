"""
Quiz generation and scoring.

The generator is asked for JSON; whatever comes back is normalized into a
QuizSpec. If generation fails or the JSON does not fit, a deterministic
fallback quiz is built from the words themselves.
"""
import json
import logging
import re
import string
from collections import Counter
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Sequence, Tuple, Union

from app.config import get_settings
from app.exceptions import QuizFormatError, QuizValidationError
from app.schemas.quiz import (
    FillBlankQuestion,
    MatchingPayload,
    MatchPair,
    MultipleChoiceQuestion,
    QuizAttemptResult,
    QuizSpec,
    QuizType,
    VocabularyWord,
)
from app.services import llm_service
from app.services.llm_service import GenerationResult

settings = get_settings()
logger = logging.getLogger(__name__)

QUIZ_SYSTEM_PROMPT = (
    "You are a German language teacher creating quizzes for German language learners. "
    "Always respond with valid JSON."
)

OPTION_LETTERS = string.ascii_uppercase
FALLBACK_OPTIONS = {
    "A": "Option A (correct)",
    "B": "Option B",
    "C": "Option C",
    "D": "Option D",
}

_LETTER_PREFIX = re.compile(r"^([A-Za-z])\s*[\).:]\s*(.*)$", re.DOTALL)

Answers = Union[Sequence[Any], Mapping[Any, Any]]


def _coerce_words(words: Iterable[Any]) -> List[VocabularyWord]:
    coerced = [
        w if isinstance(w, VocabularyWord) else VocabularyWord.model_validate(w)
        for w in words or []
    ]
    if any(not w.word.strip() for w in coerced):
        raise QuizValidationError("Quiz words must not be blank")
    return coerced


def _validate_request(words: Iterable[Any], quiz_type: Union[QuizType, str]) -> Tuple[List[VocabularyWord], QuizType]:
    try:
        quiz_type = QuizType(quiz_type)
    except ValueError:
        raise QuizValidationError(f"Unknown quiz type: {quiz_type}")

    vocabulary = _coerce_words(words)
    if not vocabulary:
        raise QuizValidationError("No words selected for the quiz")

    return vocabulary, quiz_type


def build_quiz_prompt(words: Sequence[VocabularyWord], quiz_type: QuizType) -> str:
    """Prompt asking for one quiz of the given type over the word list"""
    words_list = ", ".join(
        f"{w.word} ({w.definition})" if w.definition else w.word
        for w in words
    )
    title = quiz_type.value.replace("_", " ").title()

    prompt = f"""You must respond with ONLY valid JSON, no explanations.

Create a German {title} quiz for the following {len(words)} words: {words_list}.
"""

    if quiz_type == QuizType.MULTIPLE_CHOICE:
        prompt += """For each word, provide a question about its meaning in English, 4 options (A, B, C, D), and the correct answer.
Keep the questions in the same order as the words.

Respond with this exact JSON structure:
{"questions": [{"question": "What does 'der Herbst' mean?", "options": {"A": "autumn", "B": "spring", "C": "summer", "D": "winter"}, "correctAnswer": "A"}]}"""

    elif quiz_type == QuizType.FILL_BLANK:
        prompt += """For each word, create a German sentence with a blank (___) where the word should go, and the correct answer.
Keep the questions in the same order as the words.

Respond with this exact JSON structure:
{"questions": [{"sentence": "Im ___ fallen die Blätter von den Bäumen.", "correctAnswer": "Herbst"}]}"""

    else:  # matching
        prompt += """Create a list of the German words and a shuffled list of English definitions to match.

Respond with this exact JSON structure:
{"words": ["der Herbst", "die Sonne"], "definitions": ["sun", "autumn"], "matches": [{"word": "der Herbst", "definition": "autumn"}, {"word": "die Sonne", "definition": "sun"}]}"""

    return prompt


async def generate_quiz(
    words: Iterable[Any],
    quiz_type: Union[QuizType, str] = QuizType.MULTIPLE_CHOICE
) -> QuizSpec:
    """
    Generate a quiz for the selected words

    Args:
        words: VocabularyWord objects (or dicts / ORM rows with word, definition)
        quiz_type: multiple_choice, fill_blank or matching

    Returns:
        QuizSpec: generated quiz, or the fallback quiz when generation fails

    Raises:
        QuizValidationError: no words or unknown quiz type
    """
    vocabulary, quiz_type = _validate_request(words, quiz_type)

    result = await llm_service.generate(
        build_quiz_prompt(vocabulary, quiz_type),
        QUIZ_SYSTEM_PROMPT,
        max_tokens=settings.QUIZ_MAX_TOKENS,
        temperature=settings.QUIZ_TEMPERATURE,
        json_mode=True
    )

    quiz = _quiz_from_generation(result, vocabulary, quiz_type)
    if quiz is None:
        return build_fallback_quiz(vocabulary, quiz_type)
    return quiz


def _quiz_from_generation(
    result: GenerationResult,
    words: Sequence[VocabularyWord],
    quiz_type: QuizType
) -> Optional[QuizSpec]:
    if not result.ok:
        logger.info(
            "Quiz generation failed (%s), using fallback %s quiz for %d words",
            result.failure.value, quiz_type.value, len(words)
        )
        return None

    try:
        data = extract_json_object(result.text)
        return normalize_quiz(data, words, quiz_type)
    except QuizFormatError as e:
        logger.info(
            "Generated quiz rejected (%s), using fallback %s quiz for %d words",
            e, quiz_type.value, len(words)
        )
        return None


def clean_json_text(text: str) -> str:
    """Strip markdown code fences around a JSON answer"""
    result_text = text.strip()
    if result_text.startswith("```json"):
        result_text = result_text[7:]
    if result_text.startswith("```"):
        result_text = result_text[3:]
    if result_text.endswith("```"):
        result_text = result_text[:-3]
    return result_text.strip()


def extract_json_object(text: str) -> Dict[str, Any]:
    """
    Parse a JSON object out of generated text

    Tries the whole (fence-stripped) text first, then the first balanced
    {...} region, so chatter before or after the object is ignored.

    Raises:
        QuizFormatError: no JSON object could be parsed
    """
    cleaned = clean_json_text(text or "")

    try:
        data = json.loads(cleaned)
        if isinstance(data, dict):
            return data
    except (ValueError, RecursionError):
        pass

    region = _first_balanced_object(cleaned)
    if region is None:
        raise QuizFormatError("no JSON object in generated text")

    try:
        data = json.loads(region)
    except (ValueError, RecursionError) as e:
        raise QuizFormatError(f"invalid JSON: {e}")

    if not isinstance(data, dict):
        raise QuizFormatError("generated JSON is not an object")
    return data


def _first_balanced_object(text: str) -> Optional[str]:
    start = text.find("{")
    if start == -1:
        return None

    depth = 0
    in_string = False
    escape_next = False

    for i in range(start, len(text)):
        ch = text[i]

        if escape_next:
            escape_next = False
            continue
        if ch == "\\":
            if in_string:
                escape_next = True
            continue
        if ch == '"':
            in_string = not in_string
            continue
        if in_string:
            continue

        if ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                return text[start:i + 1]

    return None


def normalize_quiz(data: Dict[str, Any], words: Sequence[VocabularyWord], quiz_type: QuizType) -> QuizSpec:
    """
    Map loosely structured generated JSON onto the quiz schema

    Raises:
        QuizFormatError: required parts are missing or inconsistent
    """
    if quiz_type == QuizType.MATCHING:
        return QuizSpec(type=quiz_type, questions=_normalize_matching(data, words))

    items = _question_items(data)
    if len(items) < len(words):
        raise QuizFormatError(f"expected {len(words)} questions, got {len(items)}")
    items = items[:len(words)]

    if quiz_type == QuizType.MULTIPLE_CHOICE:
        questions = [_normalize_multiple_choice(item) for item in items]
    else:
        questions = [_normalize_fill_blank(item) for item in items]

    return QuizSpec(type=quiz_type, questions=questions)


def _question_items(data: Dict[str, Any]) -> List[Dict[str, Any]]:
    for key in ("questions", "quiz", "items"):
        value = data.get(key)
        if isinstance(value, dict):
            value = value.get("questions")
        if isinstance(value, list):
            if not all(isinstance(item, dict) for item in value):
                raise QuizFormatError("questions must be objects")
            return value
    raise QuizFormatError("no question list in generated quiz")


def _text_field(item: Dict[str, Any], *keys: str) -> Optional[str]:
    for key in keys:
        value = item.get(key)
        if isinstance(value, (str, int, float)) and not isinstance(value, bool):
            value = str(value).strip()
            if value:
                return value
    return None


def _normalize_options(raw: Any) -> Dict[str, str]:
    options = {}

    if isinstance(raw, dict):
        for key, text in raw.items():
            options[str(key).strip().upper()] = str(text).strip()

    elif isinstance(raw, list):
        for index, option in enumerate(raw[:len(OPTION_LETTERS)]):
            if isinstance(option, dict):
                letter = str(option.get("key") or OPTION_LETTERS[index]).strip().upper()
                options[letter] = str(option.get("text", "")).strip()
                continue

            text = str(option).strip()
            match = _LETTER_PREFIX.match(text)
            if match and match.group(1).upper() == OPTION_LETTERS[index]:
                text = match.group(2).strip()
            options[OPTION_LETTERS[index]] = text

    if len(options) < 2 or not all(options.values()):
        raise QuizFormatError("multiple choice question needs at least two options")
    return options


def _answer_letter(answer: str, options: Dict[str, str]) -> str:
    if answer in options:
        return answer
    if answer.upper() in options:
        return answer.upper()

    match = _LETTER_PREFIX.match(answer)
    if match and match.group(1).upper() in options:
        return match.group(1).upper()

    for letter, text in options.items():
        if text.casefold() == answer.casefold():
            return letter

    raise QuizFormatError(f"answer {answer!r} is not one of the options")


def _normalize_multiple_choice(item: Dict[str, Any]) -> MultipleChoiceQuestion:
    question = _text_field(item, "question", "prompt")
    answer = _text_field(item, "correctAnswer", "correct_answer", "answer", "correct")
    if not question or not answer:
        raise QuizFormatError("multiple choice question without text or answer")

    options = _normalize_options(item.get("options", item.get("choices")))
    return MultipleChoiceQuestion(
        question=question,
        options=options,
        correct_answer=_answer_letter(answer, options),
    )


def _normalize_fill_blank(item: Dict[str, Any]) -> FillBlankQuestion:
    sentence = _text_field(item, "sentence", "question", "prompt")
    answer = _text_field(item, "correctAnswer", "correct_answer", "answer")
    if not sentence or not answer:
        raise QuizFormatError("fill in the blank question without sentence or answer")
    return FillBlankQuestion(sentence=sentence, correct_answer=answer)


def _string_list(value: Any) -> Optional[List[str]]:
    if not isinstance(value, list):
        return None
    items = [str(v).strip() for v in value if isinstance(v, (str, int, float))]
    if len(items) != len(value) or not all(items):
        return None
    return items


def _normalize_matching(data: Dict[str, Any], vocabulary: Sequence[VocabularyWord]) -> MatchingPayload:
    raw_matches = data.get("matches", data.get("pairs"))

    pairs = []
    if isinstance(raw_matches, dict):
        pairs = [(str(w).strip(), str(d).strip()) for w, d in raw_matches.items()]
    elif isinstance(raw_matches, list):
        for entry in raw_matches:
            if not isinstance(entry, dict):
                raise QuizFormatError("match entries must be objects")
            word = _text_field(entry, "word", "german")
            definition = _text_field(entry, "definition", "english", "meaning")
            if not word or not definition:
                raise QuizFormatError("match entry without word or definition")
            pairs.append((word, definition))

    if not pairs:
        raise QuizFormatError("matching quiz without matches")

    pair_words = [word for word, _ in pairs]
    if len(set(pair_words)) != len(pair_words):
        raise QuizFormatError("matching quiz repeats a word")
    lookup = dict(pairs)

    words = _string_list(data.get("words")) or pair_words
    definitions = _string_list(data.get("definitions")) or [definition for _, definition in pairs]

    if len(set(words)) != len(words):
        raise QuizFormatError("matching quiz repeats a word")
    if Counter(words) != Counter(w.word.strip() for w in vocabulary):
        raise QuizFormatError("matching quiz words differ from the selected words")
    if len(words) != len(definitions):
        raise QuizFormatError("matching quiz words and definitions differ in length")

    matches = []
    for word in words:
        if word not in lookup:
            raise QuizFormatError(f"no match given for {word!r}")
        if lookup[word] not in definitions:
            raise QuizFormatError(f"definition for {word!r} is not in the definition list")
        matches.append(MatchPair(word=word, definition=lookup[word]))

    return MatchingPayload(words=words, definitions=definitions, matches=matches)


def build_fallback_quiz(words: Iterable[Any], quiz_type: Union[QuizType, str]) -> QuizSpec:
    """Deterministic quiz built from the words alone, no generation involved"""
    vocabulary, quiz_type = _validate_request(words, quiz_type)

    if quiz_type == QuizType.MULTIPLE_CHOICE:
        questions = [
            MultipleChoiceQuestion(
                question=f"What does '{w.word}' mean?",
                options=dict(FALLBACK_OPTIONS),
                correct_answer="A",
            )
            for w in vocabulary
        ]
        return QuizSpec(type=quiz_type, questions=questions)

    if quiz_type == QuizType.FILL_BLANK:
        questions = [
            FillBlankQuestion(
                sentence=f"_____ ist ein deutsches Wort. (Fill with: {w.word})",
                correct_answer=w.word,
            )
            for w in vocabulary
        ]
        return QuizSpec(type=quiz_type, questions=questions)

    definitions = [w.definition or f"Definition for {w.word}" for w in vocabulary]
    payload = MatchingPayload(
        words=[w.word for w in vocabulary],
        definitions=definitions,
        matches=[
            MatchPair(word=w.word, definition=d)
            for w, d in zip(vocabulary, definitions)
        ],
    )
    return QuizSpec(type=quiz_type, questions=payload)


def _expected_answers(quiz: QuizSpec) -> List[str]:
    if isinstance(quiz.questions, MatchingPayload):
        return [m.definition for m in quiz.questions.matches]
    return [q.correct_answer for q in quiz.questions]


def _iter_answers(submitted_answers: Optional[Answers]) -> Iterator[Tuple[int, Any]]:
    if not submitted_answers:
        return
    if isinstance(submitted_answers, Mapping):
        for key, answer in submitted_answers.items():
            try:
                yield int(key), answer
            except (TypeError, ValueError):
                continue
    else:
        yield from enumerate(submitted_answers)


def score_attempt(quiz: QuizSpec, submitted_answers: Optional[Answers]) -> QuizAttemptResult:
    """
    Score one attempt of a quiz

    An answer at index i counts when question i exists and the answer equals
    its correct answer exactly. For matching quizzes the answer at index i is
    compared with the definition matched to word i; see
    matching_answers_from_indices for index based submissions.

    Args:
        quiz: Stored quiz
        submitted_answers: List of answers, or index -> answer mapping

    Returns:
        QuizAttemptResult: score out of the quiz's question count
    """
    expected = _expected_answers(quiz)
    total_questions = quiz.total_questions
    per_question = [False] * total_questions

    for index, answer in _iter_answers(submitted_answers):
        if 0 <= index < min(total_questions, len(expected)) and answer == expected[index]:
            per_question[index] = True

    return QuizAttemptResult(
        score=sum(per_question),
        total_questions=total_questions,
        per_question_correct=per_question,
    )


def matching_answers_from_indices(quiz: QuizSpec, selected_indices: Optional[Answers]) -> List[Optional[str]]:
    """
    Turn a matching submission of definition indices into definition strings

    Position i of the result is the definition chosen for word i, or None
    when nothing (or an invalid index) was chosen.
    """
    if not isinstance(quiz.questions, MatchingPayload):
        raise QuizValidationError("matching answers only apply to matching quizzes")

    definitions = quiz.questions.definitions
    answers: List[Optional[str]] = [None] * len(quiz.questions.words)

    for position, selected in _iter_answers(selected_indices):
        if not 0 <= position < len(answers):
            continue
        try:
            index = int(selected)
        except (TypeError, ValueError):
            continue
        if 0 <= index < len(definitions):
            answers[position] = definitions[index]

    return answers
