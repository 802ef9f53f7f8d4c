"""
boxgame Package
===============

A deterministic two-player scoring game played by feeding token weights
into a fixed set of green and blue boxes.

- core: boxes, players, game engine and configuration
- evaluation: command-line harness for running games

The box layout and scoring window are read from game_config.yaml.
"""
