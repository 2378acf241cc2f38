from .config import Config
from .jsonlog import configure
from .maintainer import Maintainer, resolve_token
from .metrics import Metrics

def main():
    cfg = resolve_token(Config())
    configure(cfg.log_level)
    Maintainer(cfg, Metrics(cfg.metrics_port)).run_loop()

if __name__ == "__main__":
    main()
