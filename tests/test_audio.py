import random
from unittest.mock import MagicMock

import numpy as np
import pygame
import pytest

from termrat import audio
from termrat.audio import SQUEAKS, SqueakPlayer, squeak_wave, to_pcm


@pytest.fixture
def fake_mixer(monkeypatch):
    """Make mixer start-up succeed and hand out mock Sounds."""
    monkeypatch.setattr(pygame.mixer, "init", MagicMock())
    monkeypatch.setattr(pygame.mixer, "get_init", MagicMock(return_value=(22050, -16, 2)))
    monkeypatch.setattr(pygame.mixer, "quit", MagicMock())
    make_sound = MagicMock(side_effect=lambda arr: MagicMock(name="Sound"))
    monkeypatch.setattr(pygame.sndarray, "make_sound", make_sound)
    return make_sound


@pytest.fixture
def dead_mixer(monkeypatch):
    def no_device(**kwargs):
        raise pygame.error("No available audio device")

    monkeypatch.setattr(pygame.mixer, "init", no_device)
    monkeypatch.setattr(pygame.mixer, "quit", MagicMock())


def test_squeak_wave_shape_and_level():
    wave = squeak_wave(1600.0, 450.0, 140, 22050)
    seg = int(22050 * 140 / 1000.0 / 6)
    assert wave.dtype == np.float32
    assert wave.shape == (seg * 6,)
    assert float(np.max(np.abs(wave))) <= 0.25 + 0.12 * 5 + 1e-6
    assert wave[0] == 0.0


def test_squeak_wave_gets_louder_per_step():
    wave = squeak_wave(1600.0, 450.0, 120, 22050)
    first, last = np.array_split(wave, 6)[0], np.array_split(wave, 6)[-1]
    assert np.max(np.abs(last)) > np.max(np.abs(first))


def test_squeak_wave_too_short_is_empty():
    assert squeak_wave(1600.0, 450.0, 0, 22050).size == 0


def test_to_pcm_mono_and_stereo():
    wave = np.array([0.0, 0.5, -1.0, 2.0], dtype=np.float32)
    mono = to_pcm(wave, 1)
    assert mono.dtype == np.int16
    assert mono.tolist() == [0, 16383, -32767, 32767]
    stereo = to_pcm(wave, 2)
    assert stereo.shape == (4, 2)
    assert (stereo[:, 0] == stereo[:, 1]).all()


def test_player_builds_one_sound_per_squeak(fake_mixer):
    player = SqueakPlayer()
    assert player.enabled
    assert len(player.sounds) == len(SQUEAKS)
    pcm = fake_mixer.call_args_list[0].args[0]
    assert pcm.dtype == np.int16 and pcm.ndim == 2


def test_squeak_plays_a_random_clip(fake_mixer):
    player = SqueakPlayer(rng=random.Random(3))
    index = player.squeak()
    assert 0 <= index < len(SQUEAKS)
    assert player.last_played == index
    player.sounds[index].play.assert_called_once()


def test_squeak_uses_every_clip_eventually(fake_mixer):
    player = SqueakPlayer(rng=random.Random(0))
    assert {player.squeak() for _ in range(100)} == set(range(len(SQUEAKS)))


def test_playback_errors_are_swallowed(fake_mixer):
    player = SqueakPlayer(rng=random.Random(1))
    for sound in player.sounds:
        sound.play.side_effect = pygame.error("device lost")
    player.squeak()
    assert player.enabled


def test_missing_audio_device_is_not_fatal(dead_mixer):
    player = SqueakPlayer(rng=random.Random(2))
    assert not player.enabled
    assert "audio device" in player.error
    assert player.sounds == []
    assert player.squeak() in range(len(SQUEAKS))
    player.close()
    pygame.mixer.quit.assert_not_called()


def test_close_stops_the_mixer(fake_mixer):
    player = SqueakPlayer()
    player.close()
    player.close()
    pygame.mixer.quit.assert_called_once()
    assert not player.enabled


def test_init_failure_is_logged(dead_mixer, caplog):
    with caplog.at_level("DEBUG", logger=audio.__name__):
        SqueakPlayer()
    assert "Audio disabled" in caplog.text


def test_half_started_mixer_is_shut_down(fake_mixer):
    fake_mixer.side_effect = ValueError("bad array")
    player = SqueakPlayer()
    player.close()
    assert not player.enabled
    assert player.error == "bad array"
    pygame.mixer.quit.assert_called_once()
