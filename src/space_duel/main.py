import hydra
from omegaconf import DictConfig

from space_duel.modes.play import play


@hydra.main(version_base=None, config_path="configs", config_name="config")
def my_app(cfg: DictConfig) -> None:
    match cfg.mode:
        case "play":
            play(cfg)
        case _:
            raise TypeError(f"Mode should be one of [play]. You used: {cfg.mode}")


if __name__ == "__main__":
    my_app()
