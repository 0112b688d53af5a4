from scripts.play_hand import main, play

def test_auto_play_reaches_showdown():
    lines = []
    seat = play(3, trials=100, seed=8, auto=True, print_fn=lines.append)
    assert seat in (0, 1, 2)
    assert lines[0] == "** Your Hand **"
    assert any("River Probability" in x for x in lines)
    assert lines[-1].endswith("wins **")

def test_fold_on_first_prompt():
    lines = []
    seat = play(2, trials=100, seed=8, input_fn=lambda _: "f", print_fn=lines.append)
    assert seat is None
    assert lines[-1] == "You have folded. The game ends here."

def test_prompt_repeats_on_garbage():
    answers = iter(["x", "", "c", "C", "F"])
    lines = []
    seat = play(2, trials=50, seed=1, input_fn=lambda _: next(answers), print_fn=lines.append)
    assert seat is None
    assert any("Turn Probability" in x for x in lines)

def test_main_rejects_bad_player_count(capsys):
    assert main(["--players", "9", "--trials", "10"]) == 1
    assert "Invalid input" in capsys.readouterr().err
