from message_wrap.greedy import find_optimal_split, wrap_line


class TestWrapLine:

    def test_hi_there(self, mono20):
        assert wrap_line("hi there", 100, mono20) == ["hi", "there"]

    def test_short_line_unchanged(self, mono20):
        assert wrap_line("hi yo", 100, mono20) == ["hi yo"]

    def test_empty_line_gives_one_empty_line(self, mono20):
        assert wrap_line("", 100, mono20) == [""]
        assert wrap_line("    ", 100, mono20) == [""]

    def test_repeated_spaces_are_dropped(self, mono10):
        assert wrap_line("aa    bb   cc", 50, mono10) == ["aa bb", "cc"]

    def test_long_word_emitted_alone(self, mono20):
        result = wrap_line("a supercalifragilistic b", 100, mono20)
        assert result == ["a", "supercalifragilistic", "b"]

    def test_long_word_first(self, mono20):
        assert wrap_line("enormous ok", 100, mono20) == ["enormous", "ok"]

    def test_width_bound(self, mono10):
        line = "the quick brown fox jumps over the lazy dog again and again"
        for physical in wrap_line(line, 120, mono10):
            if " " in physical:
                assert mono10.measure(physical) <= 120

    def test_no_content_loss(self, mono10):
        line = "the quick  brown fox jumps over the lazy dog"
        wrapped = wrap_line(line, 90, mono10)
        assert " ".join(wrapped).split() == line.split()


class TestFindOptimalSplit:

    def test_everything_fits(self, mono10):
        assert find_optimal_split("aaa bbb", 100, mono10) == ("aaa bbb", "")

    def test_splits_at_first_overflow(self, mono10):
        assert find_optimal_split("aaa bbb ccc ddd", 70, mono10) == ("aaa bbb", "ccc ddd")

    def test_first_token_kept_even_if_too_wide(self, mono10):
        assert find_optimal_split("abcdefghij kl mn", 50, mono10) == ("abcdefghij", "kl mn")

    def test_empty_text(self, mono10):
        assert find_optimal_split("   ", 50, mono10) == ("", "")
