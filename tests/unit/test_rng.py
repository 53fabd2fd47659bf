"""Tests for the per-thread random number generator."""

import threading

import numpy
from imgcast import random_number_generator, seed_random_number_generator


class TestRandomNumberGenerator:
    """Test random_number_generator / seed_random_number_generator."""

    def test_same_generator_within_thread(self):
        """Repeated calls in one thread return the same generator."""
        assert random_number_generator() is random_number_generator()

    def test_returns_numpy_generator(self):
        """The generator is a numpy Generator."""
        assert isinstance(random_number_generator(), numpy.random.Generator)

    def test_seeding_is_deterministic(self):
        """Seeding twice with the same seed repeats the sequence."""
        first = seed_random_number_generator(42).random(3)
        second = seed_random_number_generator(42).random(3)

        assert numpy.array_equal(first, second)

    def test_seed_replaces_generator(self):
        """The seeded generator becomes the thread's generator."""
        seeded = seed_random_number_generator(1)

        assert random_number_generator() is seeded

    def test_threads_get_their_own_generator(self):
        """Each thread lazily creates a separate generator."""
        main = random_number_generator()
        seen = []

        def worker():
            seen.append(random_number_generator())

        thread = threading.Thread(target=worker)
        thread.start()
        thread.join()

        assert len(seen) == 1
        assert seen[0] is not main
