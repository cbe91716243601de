from __future__ import annotations

import threading

from todo_service.store.ids import ID_ALPHABET, ID_LENGTH, IdGenerator

EXPECTED_ALPHABET_SIZE = 62
THREAD_COUNT = 8
IDS_PER_THREAD = 200


def test_alphabet_is_url_safe_alphanumerics():
    assert len(ID_ALPHABET) == EXPECTED_ALPHABET_SIZE
    assert len(set(ID_ALPHABET)) == EXPECTED_ALPHABET_SIZE
    assert ID_ALPHABET.isalnum()
    assert ID_ALPHABET.isascii()


def test_generate_returns_fixed_length_ids_from_alphabet():
    generator = IdGenerator()
    for _ in range(500):
        todo_id = generator.generate()
        assert len(todo_id) == ID_LENGTH
        assert set(todo_id) <= set(ID_ALPHABET)


def test_same_seed_yields_same_sequence():
    first = IdGenerator(seed=7)
    second = IdGenerator(seed=7)
    assert [first.generate() for _ in range(5)] == [second.generate() for _ in range(5)]


def test_custom_length():
    generator = IdGenerator(seed=1, length=4)
    assert generator.length == 4
    assert len(generator.generate()) == 4


def test_generate_is_safe_from_many_threads():
    generator = IdGenerator(seed=3)
    results: list[str] = []
    results_lock = threading.Lock()

    def worker() -> None:
        local = [generator.generate() for _ in range(IDS_PER_THREAD)]
        with results_lock:
            results.extend(local)

    threads = [threading.Thread(target=worker) for _ in range(THREAD_COUNT)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(results) == THREAD_COUNT * IDS_PER_THREAD
    assert all(len(todo_id) == ID_LENGTH for todo_id in results)
