import random

import pytest

from conflux.decode import (
    P_SKS,
    FactorError,
    InterpolationError,
    LowMBarError,
    PowModSmallNError,
    factor,
    factor_check,
    interpolate,
    poly_pow_mod,
    poly_rand,
    reconcile,
    zpoints,
)
from conflux.poly import Poly, PolyDivisionError


def _rand_linear_prod(rng, p, n):
    result = Poly([1], p)
    roots = set()
    for _ in range(n):
        r0 = rng.randrange(p)
        roots.add(-r0 % p)
        result = result * Poly([r0, 1], p)
    return result, roots


@pytest.mark.parametrize("seed", range(30))
def test_factorization(seed):
    rng = random.Random(seed)
    p = 97
    poly, roots = _rand_linear_prod(rng, p, rng.randint(1, 10))
    assert factor(poly) == roots


def test_canned_interpolation():
    p = P_SKS
    values = [
        50209572917763804813893169477404135246,
        523915264287429384599917983489241637041,
        193879208340335596473327301694891073112,
        336257832174512052845041381684545224326,
        525220581565510310465258018589146771167,
        369646301408454767673033771110855434260,
        371821946850459872311187739000814476019,
        144426966457292640051271632674756114101,
        379207879747256731229136438792149285186,
        46108152160169587744128314614996604924,
        227801899428306415871207999262631174702,
        207497927707680176901864453717256663645,
        190227327194805171829784109272423912872,
    ]
    points = [0, -1, 1, -2, 2, -3, 3, -4, 4, -5, 5, -6, 6]
    rfn = interpolate(values, points, -11, p)
    num_expect = [201510631159794911579036209221877731351, 1]
    denom_expect = [
        471406228141421561633415986254867829648,
        295519390096665634601203803035473291375,
        213853624487129571321714452851928100712,
        496937274460702615962215989437926963535,
        276914137420158008254462690448206036905,
        323796663999875107447504850182776354321,
        278888159583692127965164290452048385915,
        451945789461805767613376502019011847396,
        91519704684961309708461769260348368047,
        209097283573511646123086148468849229449,
        49011742009925395272518613422388842885,
        129168611341530605578585909520009112853,
        1,
    ]
    assert list(rfn.num.coeffs[: len(num_expect)]) == num_expect
    assert list(rfn.denom.coeffs[: len(denom_expect)]) == denom_expect


@pytest.mark.parametrize("seed", range(40))
def test_interpolation(seed):
    rng = random.Random(seed)
    p = P_SKS
    deg = rng.randint(1, 8)
    num_deg = rng.randrange(deg)
    denom_deg = deg - num_deg
    num, _ = _rand_linear_prod(rng, p, num_deg)
    denom, _ = _rand_linear_prod(rng, p, denom_deg)
    assert num.degree == num_deg
    assert denom.degree == denom_deg
    mbar = rng.randint(deg + 1, 9)
    points = zpoints(p, mbar + 1)
    values = [num.eval(z) * pow(denom.eval(z), -1, p) % p for z in points]
    rfn = interpolate(values, points, num_deg - denom_deg, p)
    assert rfn.num == num
    assert rfn.denom == denom


def test_canned_reconcile():
    p = P_SKS
    set1 = {
        8952777669297728851091848378379377617,
        162085839528403560100929159811161460293,
        181484969924633124558171484324504401075,
        229305846979453177871691812413112208676,
        284001389401364703525738874626145923778,
        333026889954813771673937036618957938545,
        401537002901186069501925598757914356337,
        408597178507212301417184698839771487762,
        419504520512224794235831228788173561599,
        454233583376105592897174699470827876606,
    }
    set2 = {
        110633522524732890588089295220994803977,
        194223389264051186134544082841809104115,
        332150253195118153886619367406744054566,
        431844203966462129313295191768688911950,
        505931393060085050712145173574130038354,
    }
    values = [
        325567491442841181381134847399735305017,
        395037391445571452972721527936312200522,
        383458038386494547334014086327713094385,
        217174866600085692973450729194577792210,
        385011357579896657977528957507240613253,
        402781597512949507740967136267068344630,
        232703526201630690874279192086579665024,
        517714262168165665799778316804817689980,
        32661406820901877880191293945563287049,
        367894599536965704928081351211416869922,
        277789799296462035245112840153664041656,
        55517351568679792361000876949275186668,
        262234380059790006121506334185487551936,
        269358796384139303257285300138875449325,
        230494386168101481930613981157929389116,
        497730714764611287106884245786790787566,
        51691307971910305814631217339926265833,
        290446399753991600191456012845409641740,
        427530032313331291010476618229794543878,
        120344848642406229503266522177541779886,
        399989145164239204145711147975735514135,
    ]
    points = [0, -1, 1, -2, 2, -3, 3, -4, 4, -5, 5, -6, 6, -7, 7, -8, 8, -9, 9, -10, 10]
    diff1, diff2 = reconcile(values, points, len(set1) - len(set2), p)
    assert diff1 == set1
    assert diff2 == set2


@pytest.mark.parametrize("seed", range(20))
def test_reconcile(seed):
    rng = random.Random(seed)
    p = P_SKS
    mbar = rng.randint(1, 15)
    n = mbar + 1
    points = zpoints(p, n)
    m = rng.randint(1, mbar * 2)
    m1 = rng.randrange(m)
    m2 = m - m1
    set1 = {rng.randrange(p) for _ in range(m1)}
    set2 = {rng.randrange(p) for _ in range(m2)}
    svalues1 = [1] * n
    svalues2 = [1] * n
    for i, z in enumerate(points):
        for s in set1:
            svalues1[i] = svalues1[i] * (z - s) % p
        for s in set2:
            svalues2[i] = svalues2[i] * (z - s) % p
    values = [a * pow(b, -1, p) % p for a, b in zip(svalues1, svalues2)]
    try:
        diff1, diff2 = reconcile(values, points, m1 - m2, p)
    except (LowMBarError, InterpolationError, FactorError, PolyDivisionError):
        assert m > mbar
    else:
        assert diff1 == set1
        assert diff2 == set2


def test_low_mbar():
    p = P_SKS
    values = [
        260405721246918987273155339614020972656,
        243393001638573476362665007855413044937,
        505905314437392989818278468923779137359,
        105358332430258313066486664282953088018,
        2560440886574256298562818527295701964,
        118746265689993312951910051444187575775,
        529698088600031242289045200206930982765,
        441488592726201746187835041000728091281,
    ]
    points = zpoints(p, len(values))
    with pytest.raises(LowMBarError):
        reconcile(values, points, 3, p)


def test_factor_check():
    p = P_SKS
    x = Poly(
        [
            23910866165498202015403350789738609658,
            117479252320778380699969369242473163812,
            1,
        ],
        p,
    )
    assert factor_check(x) is True


def test_poly_nom_nom_nom():
    p = P_SKS
    num = Poly([201510631159794911579036209221877731351, 1], p)
    denom = Poly(
        [
            471406228141421561633415986254867829648,
            295519390096665634601203803035473291375,
            213853624487129571321714452851928100712,
            496937274460702615962215989437926963535,
            276914137420158008254462690448206036905,
            323796663999875107447504850182776354321,
            278888159583692127965164290452048385915,
            451945789461805767613376502019011847396,
            91519704684961309708461769260348368047,
            209097283573511646123086148468849229449,
            49011742009925395272518613422388842885,
            129168611341530605578585909520009112853,
            1,
        ],
        p,
    )
    num_at = num.eval(-7 % p)
    assert num_at == 201510631159794911579036209221877731344
    denom_at = denom.eval(-7 % p)
    assert denom_at == 77151748131754717019960190430023395826
    assert num_at * pow(denom_at, -1, p) % p == 372597725470208235965358485960825765733


def test_zpoints_matches_canned_points():
    p = P_SKS
    expected = [0, -1, 1, -2, 2, -3, 3, -4, 4, -5, 5, -6, 6]
    assert zpoints(p, 13) == [z % p for z in expected]


def test_interpolate_rejects_large_degree_difference():
    with pytest.raises(InterpolationError):
        interpolate([1, 2, 3], [0, -1, 1], 4, 97)


def test_poly_pow_mod_rejects_small_exponent():
    f = Poly([0, 1], 97)
    g = Poly([1, 0, 1], 97)
    with pytest.raises(PowModSmallNError):
        poly_pow_mod(f, 3, g)


def test_poly_pow_mod_fourth_power():
    f = Poly([0, 1], 97)
    g = Poly([1, 0, 1], 97)
    assert poly_pow_mod(f, 4, g) == Poly([1], 97)


def test_poly_rand_is_monic_of_degree():
    poly = poly_rand(97, 6)
    assert poly.degree == 6
    assert poly.coeffs[6] == 1
    assert all(0 <= c < 97 for c in poly.coeffs)


def test_factor_of_one_is_empty():
    assert factor(Poly([1], 97)) == set()


def test_factor_of_other_constant_fails():
    with pytest.raises(FactorError):
        factor(Poly([5], 97))


def test_factor_linear():
    assert factor(Poly([3, 1], 97)) == {94}