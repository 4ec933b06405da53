import logging
import sys

from nano_neuron import (
    PROFILES,
    LinearUnit,
    celsius_to_fahrenheit,
    evaluate,
    generate_datasets,
    summarize_history,
    train,
    validate_config,
)


def pick_menu(options):
    """
    Arrow-key menu over the training profiles.

    Starts on the last (full training) profile and returns it straight away
    when stdin is not a terminal, so the script also runs piped or under CI.
    """
    if not sys.stdin.isatty():
        return len(options) - 1
    import tty, termios
    selected = len(options) - 1
    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        while True:
            # Clear and draw menu
            sys.stdout.write("\r\033[J")
            for i, opt in enumerate(options):
                prefix = "> " if i == selected else "  "
                sys.stdout.write(f"{prefix}{opt}\r\n")
            sys.stdout.write(f"\033[{len(options)}A")  # move cursor back up
            sys.stdout.flush()
            # Read keypress
            ch = sys.stdin.read(1)
            if ch == '\r':
                break
            if ch == '\x1b':
                sys.stdin.read(1)  # skip [
                arrow = sys.stdin.read(1)
                if arrow == 'A':
                    selected = (selected - 1) % len(options)
                elif arrow == 'B':
                    selected = (selected + 1) % len(options)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)
        sys.stdout.write("\r\033[J")  # clean up
        sys.stdout.flush()
    return selected


def main():
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    print("NanoNeuron: learning Celsius -> Fahrenheit\n")

    profiles = list(PROFILES.values())
    choice = pick_menu([p['name'] for p in profiles])
    config = validate_config(dict(profiles[choice]))

    model = LinearUnit.random(config['seed'])
    print(f"Configuration: {config['name']}")
    print(f"  Epochs: {config['epochs']}  |  Alpha: {config['alpha']}")
    print(f"  Initial w={model.w:.4f}, b={model.b:.4f}\n")

    train_inputs, train_targets, test_inputs, test_targets = generate_datasets()
    cost_history = train(
        model,
        config['epochs'],
        config['alpha'],
        train_inputs,
        train_targets,
        log_interval=config['log_interval'],
    )

    summary = summarize_history(cost_history)
    print(f"\n{'='*60}")
    print("Training Summary")
    print(f"{'='*60}")
    print(f"First cost: {summary['first']:.6f}  |  Last cost: {summary['last']:.6f}")
    print(f"Learned w={model.w:.4f}, b={model.b:.4f}  (true w=1.8, b=32)")

    metrics = evaluate(model, test_inputs, test_targets)
    print(f"Test cost: {metrics['cost']:.6f}  |  Max abs error: {metrics['max_abs_error']:.4f}")

    celsius = 30
    print(f"\nOur model thinks that {celsius}C is {model.predict(celsius):.4f}F")
    print(f"{celsius}C is actually {celsius_to_fahrenheit(celsius):.4f}F")


if __name__ == '__main__':
    main()
