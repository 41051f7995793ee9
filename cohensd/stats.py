import numpy


def mean(values, axis=None):
    values = numpy.asarray(values, dtype=numpy.float64)
    if _size(values, axis) == 0:
        raise ValueError('mean of an empty sample is undefined')
    return _result(values.mean(axis=axis), axis)


def var(values, axis=None):
    """Sample variance (denominator n - 1), nan for fewer than two values."""
    values = numpy.asarray(values, dtype=numpy.float64)
    if _size(values, axis) < 2:
        return _undefined(values, axis)
    return _result(values.var(axis=axis, ddof=1), axis)


def pooled_sd(treatment, control, axis=None):
    """Pooled standard deviation of two samples.

    With `axis` set, one value is returned per slice along the other
    dimension, e.g. per row for `axis=1`. A sample of size one contributes
    nothing to the pooled sum of squares.
    """
    treatment = numpy.asarray(treatment, dtype=numpy.float64)
    control = numpy.asarray(control, dtype=numpy.float64)

    n1 = _size(treatment, axis)
    n2 = _size(control, axis)

    dof = n1 + n2 - 2
    if dof <= 0:
        return _undefined(treatment, axis)

    ss = 0.
    for (values, n) in ((treatment, n1), (control, n2)):
        if n > 1:
            ss = ss + (n - 1) * var(values, axis)

    return _result(numpy.sqrt(ss / dof), axis)


def cohensd(treatment, control, pooled=True, undefined=0.0):
    """Compute Cohen's d effect size measure between two samples.

    Parameters
    ----------
    treatment : array_like
        Metric values collected from the treatment (case) group.
    control : array_like
        Metric values collected from the control group.
    pooled : bool, optional
        When True, the pooled standard deviation between the treatment and
        control groups will be used when computing Cohen's d. When False, it is
        assumed that both groups are drawn from the same distribution and the
        standard deviation of the concatenated samples is used.
    undefined : float, optional
        Returned when the standard deviation is zero, not finite or cannot be
        computed.

    Returns
    -------
    d : float
        The Cohen's d effect size measure
    """
    treatment = numpy.asarray(treatment, dtype=numpy.float64)
    control = numpy.asarray(control, dtype=numpy.float64)

    (d, ) = cohensd_rows(
        treatment.reshape(1, -1), control.reshape(1, -1),
        pooled=pooled, undefined=undefined
    )
    return float(d)


def cohensd_rows(treatment, control, pooled=True, undefined=0.0):
    """Compute Cohen's d for every row of two matrices.

    Row i of `treatment` is compared against row i of `control`. Both
    arguments are (rows, samples) arrays with the same number of rows; the
    number of samples may differ between them.

    Returns
    -------
    d : numpy.ndarray
        One effect size per row. Rows whose standard deviation is zero,
        undefined or not finite (e.g. a row holding nan or inf) hold
        `undefined`.
    """
    treatment = numpy.asarray(treatment, dtype=numpy.float64)
    control = numpy.asarray(control, dtype=numpy.float64)

    if treatment.ndim != 2 or control.ndim != 2:
        raise ValueError('treatment and control must be two-dimensional')
    if treatment.shape[0] != control.shape[0]:
        raise ValueError(
            'treatment has {0} rows but control has {1}'.format(
                treatment.shape[0], control.shape[0]
            )
        )

    with numpy.errstate(invalid='ignore', over='ignore'):
        difference = mean(treatment, axis=1) - mean(control, axis=1)

        if pooled:
            sd = pooled_sd(treatment, control, axis=1)
        else:
            sd = numpy.sqrt(
                var(numpy.concatenate((treatment, control), axis=1), axis=1)
            )

        d = numpy.full(treatment.shape[0], undefined, dtype=numpy.float64)
        defined = numpy.isfinite(sd) & (sd > 0)
        d[defined] = difference[defined] / sd[defined]

    return d


def _size(values, axis):
    return values.size if axis is None else values.shape[axis]


def _result(value, axis):
    return float(value) if axis is None else value


def _undefined(values, axis):
    if axis is None:
        return float('nan')
    return numpy.full(values.shape[:axis] + values.shape[axis + 1:], numpy.nan)
