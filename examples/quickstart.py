# %% [markdown]
# # fuzzytree quickstart
#
# Edit distances with pluggable cost models, and a BK-tree to search a
# corpus without comparing against every entry.
#
# | Part | Topic |
# |------|-------|
# | 1 | Edit distances |
# | 2 | Cost models |
# | 3 | BK-tree search |
# | 4 | Polars |

# %%
import polars as pl

import fuzzytree as ft

# %% [markdown]
# ## Part 1: Edit distances
#
# Levenshtein counts insertions, deletions and substitutions. The restricted
# Damerau-Levenshtein distance also counts swapping two neighbours as one edit.

# %%
pairs = [("kitten", "sitting"), ("michael", "mickael"), ("banana", "abnana")]
for a, b in pairs:
    print(
        f"{a:>8} / {b:<8}"
        f" levenshtein={ft.levenshtein(a, b)}"
        f" damerau={ft.damerau_levenshtein(a, b)}"
        f" jaro_winkler={ft.jaro_winkler_similarity(a, b):.3f}"
    )

# %% [markdown]
# When only small distances matter, pass a limit: the computation stops as
# soon as the distance is known to reach it.

# %%
print(ft.levenshtein("a" * 500, "b" * 500, limit=3))

# Reuse one table across many Damerau-Levenshtein calls
workspace = ft.get_workspace(20, 20)
names = ["mickael", "mikael", "michel", "mechail"]
print([ft.damerau_levenshtein("michael", n, workspace=workspace) for n in names])

# %% [markdown]
# ## Part 2: Cost models
#
# Weighted Levenshtein takes its costs from a cost function. The locale tuned
# model knows that accents, look-alike digits and close consonants are cheap
# mistakes in French names.

# %%
for variant in ["michael", "michaël", "nichael", "mikhaïl", "Lichael"]:
    print(
        f"Michael / {variant:<8}"
        f" uniform={ft.weighted_levenshtein('Michael', variant)}"
        f" case_insensitive={ft.weighted_levenshtein('Michael', variant, 'case_insensitive')}"
        f" locale_tuned={ft.weighted_levenshtein('Michael', variant, 'locale_tuned')}"
    )

# %% [markdown]
# ## Part 3: BK-tree search
#
# A BK-tree finds every term within a distance of the query, or the closest
# term, while skipping most of the corpus.
#
# The locale tuned costs are not a metric (`c`/`s` and `s`/`z` cost 2, `c`/`z`
# costs 5), so building the tree warns that searches may miss matches.

# %%
places = [
    "Bard-lès-Pesmes",
    "Barlès-Pesmes",
    "Barlès-Pèmes",
    "Bard-lespesmes",
    "Barre-les-Pesmes",
    "Bard-lès-Pennes",
    "Bar-les-Pemmes",
    "Bars-l'epesmes",
    "Bars-et-Pesmes",
    "Barré-Pesmes",
]

tree = ft.BKTree(ft.WeightedLevenshtein("locale_tuned"), places)
print(tree)
print(tree.find_best_word_match_with_distance("BARD LES PESMES"))

for result in tree.search("Barre Pesmes", max_distance=8):
    print(f"  {result.distance:>2} {result.text}")

# %% [markdown]
# ## Part 4: Polars
#
# FuzzyIndex builds a tree from a column, and the `.fuzzy` namespace brings
# the distances into expressions.

# %%
communes = pl.DataFrame({"code": ["70049", "25056", "70048"], "name": places[:3]})
index = ft.FuzzyIndex.from_dataframe(communes, "name", normalize="strict")
print(index.search_series(pl.Series(["BARD LES PESMES", "barles pemes"]), max_distance=1))

df = pl.DataFrame({"typed": ["Barlès Pesmes", "Bard-les-Pennes", "Paris"]})
print(
    df.with_columns(
        best=pl.col("typed").fuzzy.best_match(
            places, max_distance=10, algorithm="weighted_levenshtein", costs="locale_tuned"
        ),
        dist=pl.col("typed").fuzzy.distance("Bard-lès-Pesmes", "damerau"),
    )
)
