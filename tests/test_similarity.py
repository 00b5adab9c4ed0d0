import pytest

from lexsim.corpus import StandardCorpus
from lexsim.similarity import ScorerFactory, SimilarityMatrix, StandardScorer, dot_product


def build_corpus(texts):
    corpus = StandardCorpus()
    for name, text in texts.items():
        corpus.add_text(name, text)
    return corpus


@pytest.fixture
def three_docs():
    shared = "whale ship sea captain whale harpoon sea sea"
    return build_corpus({
        "moby.txt": shared,
        "moby_copy.txt": shared,
        "pride.txt": "ball sister marriage sea letter",
    })


def test_dot_product_over_shared_terms():
    assert dot_product({"A": 0.5, "B": 0.25}, {"B": 0.5, "C": 0.5}) == 0.125
    assert dot_product({"A": 0.5}, {"B": 0.5}) == 0.0
    assert dot_product({}, {"B": 0.5}) == 0.0


def test_dot_product_is_order_independent():
    small = {"X": 0.1, "Y": 0.2}
    large = {"X": 0.3, "Y": 0.4, "Z": 0.3}
    assert dot_product(small, large) == dot_product(large, small)


def test_scenario_a(scenario_a_texts):
    corpus = build_corpus(scenario_a_texts)
    matrix = StandardScorer().score(corpus)
    assert matrix.get(0, 1) == pytest.approx(3 / 36)


def test_scenario_b_identical_documents_score_highest(three_docs):
    matrix = StandardScorer().score(three_docs)
    profile = three_docs.get_profile(0)

    assert matrix.get(0, 1) == pytest.approx(sum(w * w for w in profile.values()))
    assert matrix.get(0, 1) > matrix.get(0, 2)
    assert matrix.get(0, 1) > matrix.get(1, 2)


def test_symmetry_is_exact(three_docs):
    matrix = StandardScorer().score(three_docs)
    for i in range(matrix.size):
        for j in range(matrix.size):
            if i != j:
                assert matrix.get(i, j) == matrix.get(j, i)
                assert matrix[i, j] == matrix[j, i]


def test_self_pairs_are_not_scored(three_docs):
    matrix = StandardScorer().score(three_docs)
    with pytest.raises(ValueError):
        matrix.get(1, 1)
    assert all(i < j for i, j, _ in matrix.pairs())


def test_disjoint_vocabularies_score_zero():
    corpus = build_corpus({"a": "apple banana", "b": "cherry date", "c": ""})
    matrix = StandardScorer().score(corpus)
    assert matrix.get(0, 1) == 0.0
    assert matrix.get(0, 2) == 0.0
    assert matrix.get(1, 2) == 0.0


def test_pairs_and_dense_view(three_docs):
    matrix = StandardScorer().score(three_docs)
    pairs = list(matrix.pairs())
    assert [(i, j) for i, j, _ in pairs] == [(0, 1), (0, 2), (1, 2)]
    assert matrix.pair_count == 3

    dense = matrix.to_dense()
    assert dense.shape == (3, 3)
    assert (dense == dense.T).all()
    assert dense[0, 0] == 0.0
    assert dense[0, 1] == matrix.get(0, 1)


def test_matrix_rejects_invalid_pairs():
    with pytest.raises(ValueError):
        SimilarityMatrix(2, {(1, 0): 0.5})
    matrix = SimilarityMatrix(2, {(0, 1): 0.5})
    with pytest.raises(IndexError):
        matrix.get(0, 2)


def test_empty_and_single_document_corpora():
    assert list(StandardScorer().score(build_corpus({})).pairs()) == []
    assert list(StandardScorer().score(build_corpus({"only": "words"})).pairs()) == []


def test_scoring_is_deterministic(three_docs):
    first = list(StandardScorer().score(three_docs).pairs())
    second = list(StandardScorer().score(three_docs).pairs())
    assert first == second


def test_factory_selects_standard_for_small_corpora():
    scorer = ScorerFactory.create_scorer('auto', doc_count=3, sparse_threshold=100)
    assert isinstance(scorer, StandardScorer)
    assert isinstance(ScorerFactory.create_scorer('standard'), StandardScorer)


def test_factory_rejects_unknown_mode():
    with pytest.raises(ValueError):
        ScorerFactory.create_scorer('parallel')


class TestSparseScorer:
    @pytest.fixture(autouse=True)
    def _require_sparse_libraries(self):
        pytest.importorskip("scipy.sparse")
        pytest.importorskip("sklearn")

    def test_matches_standard_scorer(self, three_docs):
        from lexsim.similarity.sparse_scorer import SparseScorer

        sparse = SparseScorer().score(three_docs)
        standard = StandardScorer().score(three_docs)
        for (i, j, expected), (a, b, actual) in zip(standard.pairs(), sparse.pairs()):
            assert (i, j) == (a, b)
            assert actual == pytest.approx(expected)

    def test_scenario_a(self, scenario_a_texts):
        from lexsim.similarity.sparse_scorer import SparseScorer

        matrix = SparseScorer().score(build_corpus(scenario_a_texts))
        assert matrix.get(0, 1) == pytest.approx(3 / 36)
        assert matrix.get(1, 0) == matrix.get(0, 1)

    def test_empty_profiles(self):
        from lexsim.similarity.sparse_scorer import SparseScorer

        matrix = SparseScorer().score(build_corpus({"a": "", "b": "the of"}))
        assert list(matrix.pairs()) == [(0, 1, 0.0)]

    def test_factory_auto_selects_sparse_above_threshold(self):
        from lexsim.similarity.sparse_scorer import SparseScorer

        scorer = ScorerFactory.create_scorer('auto', doc_count=10, sparse_threshold=5)
        assert isinstance(scorer, SparseScorer)
