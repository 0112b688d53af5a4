import matplotlib.pyplot as plt
import numpy as np

from holdem_odds.helpers.sweep import players_curve

# --- CONFIGURATION ---
HANDS = {
    "AA": ["Ah", "As"],
    "AKs": ["Ah", "Kh"],
    "77": ["7d", "7c"],
    "72o": ["7h", "2s"],
}
PLAYERS = (2, 3, 4, 5, 6)
RUNS = 5
TRIALS = 2_000
SEED = 7
OUT_FILE = 'graph_win_by_players.png'


def plot_win_by_players():
    plt.figure(figsize=(10, 6))

    for label, hand in HANDS.items():
        xs, means, stds = players_curve(hand, players=PLAYERS, runs=RUNS, trials=TRIALS, seed=SEED)
        plt.errorbar(xs, means, yerr=stds, marker='o', capsize=4, label=label)
        print(f"{label}: " + ", ".join(f"{n}p={m:.1f}%" for n, m in zip(xs, means)))

    plt.axhline(0, color='black', linewidth=1)
    plt.xticks(np.asarray(PLAYERS))
    plt.ylim(0, 100)
    plt.title('Preflop Win Probability by Table Size', fontsize=14, fontweight='bold')
    plt.xlabel('Players at the table', fontsize=12)
    plt.ylabel('Win probability (%)', fontsize=12)
    plt.legend()
    plt.grid(True, alpha=0.3)
    plt.tight_layout()
    plt.savefig(OUT_FILE, dpi=300)
    print(f"Saved '{OUT_FILE}'")
    plt.show()


if __name__ == "__main__":
    print("\nGenerating win probability graphs...\n")
    plot_win_by_players()
