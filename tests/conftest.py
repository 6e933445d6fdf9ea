import logging
import pytest

from wordpieces.config_loader import load_wordpieces_config


CONLLU_SAMPLE = """# sent_id = 1
# text = Unworkable unworkably cats purr.
1\tUnworkable\tunworkable\tADJ\tJJ\t_\t3\tamod\t_\t_
2\tunworkably\tunworkably\tADV\tRB\t_\t3\tadvmod\t_\t_
3\tcats\tcat\tNOUN\tNNS\tNumber=Plur\t4\tnsubj\t_\t_
4-5\tpurr.\t_\t_\t_\t_\t_\t_\t_\t_
4\tpurr\tpurr\tVERB\tVBP\t_\t0\troot\t_\t_
4.1\tghost\t_\t_\t_\t_\t_\t_\t4:dep\t_
5\t.\t.\tPUNCT\t.\t_\t4\tpunct\t_\t_

1\tdogs\tdog\tNOUN\tNNS\t_\t2\tnsubj\t_\t_
2\tbark\tbark\tVERB\tVBP\t_\t0\troot\t_\t_
"""


@pytest.fixture(autouse=True)
def reset_logging_and_config(monkeypatch):
    """Remove handlers installed by setup_wordpiece_logging and clear the config cache."""
    # Wide consoles keep long paths in log messages on one line
    monkeypatch.setenv("COLUMNS", "400")
    load_wordpieces_config.cache_clear()
    yield
    for handler in logging.root.handlers[:]:
        handler.close()
        logging.root.removeHandler(handler)
    for name in ["wordpieces", "wordpieces.stats", "wordpieces.render"]:
        logger_obj = logging.getLogger(name)
        for handler in logger_obj.handlers[:]:
            handler.close()
            logger_obj.removeHandler(handler)
    load_wordpieces_config.cache_clear()


@pytest.fixture
def vocab_file(tmp_path):
    """Vocabulary file with word-initial pieces and a few single characters."""
    path = tmp_path / "vocab.txt"
    path.write_text("cat\ncats\nun\nwork\nable\npurr\n.\nd\no\ng\ns\nbark\n", encoding="utf-8")
    return path


@pytest.fixture
def corpus_file(tmp_path):
    path = tmp_path / "corpus.conllu"
    path.write_text(CONLLU_SAMPLE, encoding="utf-8")
    return path
