import logging

import click


def format_values(values, with_size=False):
    lines = []
    if with_size:
        lines.append(str(len(values)))
    lines.append(' '.join(str(v) for v in values))
    return '\n'.join(lines)


@click.group()
@click.option('--verbose', '-v', count=True, help='Increase log verbosity')
def main(verbose):
    level = [logging.WARNING, logging.INFO, logging.DEBUG][min(verbose, 2)]
    logging.basicConfig(level=level,
                        format='%(asctime)s %(name)s %(levelname)s %(message)s')


@main.command()
@click.option('--random', '-n', 'length', default=0, help='Number of random values')
@click.option('--max-elem', '-m', default=100, help='Random values lie in [-M, M]')
@click.option('--seed', '-s', default=None, type=int, help='Random seed')
@click.option('--with-size', is_flag=True, help='Print the count first')
@click.argument('values', nargs=-1, type=int)
def sort(length, max_elem, seed, with_size, values):
    """Sort integers with a binomial heap."""
    from binheap.sort import gen_values, heap_sort

    values = list(values)
    if length > 0:
        values.extend(gen_values(length, max_elem, seed=seed))
    click.echo(format_values(heap_sort(values), with_size))


@main.command()
@click.option('--config', '-c', 'path', default=None,
              type=click.Path(exists=True, dir_okay=False),
              help='Json file with the cases to run')
@click.option('--seed', '-s', default=None, type=int, help='Random seed')
def selftest(path, seed):
    """Sort random values and check the results."""
    from binheap.config import DEFAULT_CASES, load_cases
    from binheap.sort import SortCheckError
    from binheap.sort import selftest as run_selftest

    cases = DEFAULT_CASES if path is None else load_cases(path)
    try:
        count = run_selftest(cases, seed=seed)
    except SortCheckError as e:
        click.echo('Before:')
        click.echo(format_values(e.before))
        click.echo('After:')
        click.echo(format_values(e.after))
        raise SystemExit(1)
    click.echo(f'{count} cases passed')


if __name__ == '__main__':
    main()
