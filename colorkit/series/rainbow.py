"""Built-in rainbow color series.

256 evenly spaced samples of the classic rainbow colormap:
red = |2x - 0.5|, green = sin(pi x), blue = cos(pi x / 2), clipped to [0, 1].
The table is static data; consumers depend on these exact values.
"""
from typing import Tuple

from ..types.color_types import ControlPoint

RAINBOW: Tuple[ControlPoint, ...] = (
    (0.0, (0.5, 0.0, 1.0)),
    (0.0039215686274509803, (0.49215686274509807, 0.012319659535238442, 0.99998102734872685)),
    (0.0078431372549019607, (0.48431372549019608, 0.02463744919538197, 0.99992411011483062)),
    (0.011764705882352941, (0.47647058823529409, 0.036951499389144889, 0.99982925045805271)),
    (0.015686274509803921, (0.46862745098039216, 0.049259941092816853, 0.9996964519778716)),
    (0.019607843137254902, (0.46078431372549022, 0.061560906133942835, 0.9995257197133659)),
    (0.023529411764705882, (0.45294117647058824, 0.073852527474873961, 0.99931706014302291)),
    (0.027450980392156862, (0.44509803921568625, 0.086132939496145991, 0.99907048118449315)),
    (0.031372549019607843, (0.43725490196078431, 0.098400278279642706, 0.99878599219428998)),
    (0.035294117647058823, (0.42941176470588238, 0.11065268189150083, 0.99846360396743394)),
    (0.039215686274509803, (0.42156862745098039, 0.12288829066471411, 0.9981033287370441)),
    (0.043137254901960784, (0.4137254901960784, 0.13510524748139296, 0.99770518017387289)),
    (0.047058823529411764, (0.40588235294117647, 0.1473016980546375, 0.99726917338578802)),
    (0.050980392156862744, (0.39803921568627454, 0.15947579120998079, 0.99679532491719913)),
    (0.054901960784313725, (0.39019607843137255, 0.1716256791663596, 0.99628365274842945)),
    (0.058823529411764705, (0.38235294117647056, 0.18374951781657034, 0.99573417629503447)),
    (0.062745098039215685, (0.37450980392156863, 0.19584546700716696, 0.99514691640706443)),
    (0.066666666666666666, (0.3666666666666667, 0.20791169081775931, 0.99452189536827329)),
    (0.070588235294117646, (0.35882352941176471, 0.21994635783966859, 0.99385913689527372)),
    (0.074509803921568626, (0.35098039215686272, 0.23194764145389815, 0.99315866613663617)),
    (0.078431372549019607, (0.34313725490196079, 0.24391372010837714, 0.99242050967193574)),
    (0.082352941176470587, (0.33529411764705885, 0.25584277759443558, 0.99164469551074275)),
    (0.086274509803921567, (0.32745098039215687, 0.26773300332246791, 0.99083125309156028)),
    (0.090196078431372548, (0.31960784313725488, 0.27958259259674378, 0.98998021328070696)),
    (0.094117647058823528, (0.31176470588235294, 0.29138974688932462, 0.98909160837114596)),
    (0.098039215686274508, (0.30392156862745101, 0.30315267411304353, 0.98816547208125938)),
    (0.10196078431372549, (0.29607843137254902, 0.31486958889350786, 0.98720183955356899)),
    (0.10588235294117647, (0.28823529411764703, 0.32653871284008329, 0.98620074735340257)),
    (0.10980392156862745, (0.2803921568627451, 0.33815827481581706, 0.98516223346750653)),
    (0.11372549019607843, (0.27254901960784317, 0.34972651120626114, 0.98408633730260442)),
    (0.11764705882352941, (0.26470588235294118, 0.36124166618715292, 0.98297309968390179)),
    (0.12156862745098039, (0.25686274509803919, 0.37270199199091397, 0.98182256285353686)),
    (0.12549019607843137, (0.24901960784313726, 0.38410574917192586, 0.98063477046897773)),
    (0.12941176470588237, (0.24117647058823527, 0.39545120687054253, 0.97940976760136589)),
    (0.13333333333333333, (0.23333333333333334, 0.40673664307580015, 0.97814760073380569)),
    (0.13725490196078433, (0.22549019607843135, 0.41796034488678346, 0.97684831775960068)),
    (0.14117647058823529, (0.21764705882352942, 0.42912060877260894, 0.9755119679804366)),
    (0.14509803921568629, (0.20980392156862743, 0.44021574083098736, 0.97413860210451009)),
    (0.14901960784313725, (0.20196078431372549, 0.45124405704532283, 0.97272827224460479)),
    (0.15294117647058825, (0.19411764705882351, 0.46220388354031322, 0.97128103191611381)),
    (0.15686274509803921, (0.18627450980392157, 0.47309355683601007, 0.96979693603500949)),
    (0.16078431372549021, (0.17843137254901958, 0.48391142410030158, 0.96827604091575892)),
    (0.16470588235294117, (0.17058823529411765, 0.49465584339977881, 0.96671840426918743)),
    (0.16862745098039217, (0.16274509803921566, 0.5053251839489481, 0.96512408520028903)),
    (0.17254901960784313, (0.15490196078431373, 0.51591782635775107, 0.96349314420598309)),
    (0.17647058823529413, (0.14705882352941174, 0.52643216287735572, 0.96182564317281904)),
    (0.1803921568627451, (0.13921568627450981, 0.53686659764417999, 0.96012164537462819)),
    (0.18431372549019609, (0.13137254901960782, 0.54721954692211117, 0.95838121547012223)),
    (0.18823529411764706, (0.12352941176470589, 0.55748943934288553, 0.95660441950044084)),
    (0.19215686274509805, (0.1156862745098039, 0.5676747161445902, 0.95479132488664431)),
    (0.19607843137254902, (0.10784313725490197, 0.57777383140825112, 0.9529420004271566)),
    (0.20000000000000001, (0.099999999999999978, 0.58778525229247314, 0.95105651629515353)),
    (0.20392156862745098, (0.092156862745098045, 0.59770745926609359, 0.94913494403590126)),
    (0.20784313725490197, (0.084313725490196056, 0.60753894633881689, 0.94717735656404023)),
    (0.21176470588235294, (0.076470588235294124, 0.61727822128979293, 0.94518382816081958)),
    (0.21568627450980393, (0.068627450980392135, 0.62692380589410646, 0.94315443447127745)),
    (0.2196078431372549, (0.060784313725490202, 0.63647423614714138, 0.94108925250137165)),
    (0.22352941176470589, (0.052941176470588214, 0.64592806248678736, 0.93898836061505653)),
    (0.22745098039215686, (0.045098039215686281, 0.65528385001345357, 0.9368518385313106)),
    (0.23137254901960785, (0.037254901960784292, 0.66454017870785798, 0.93467976732111058)),
    (0.23529411764705882, (0.029411764705882359, 0.67369564364655721, 0.93247222940435581)),
    (0.23921568627450981, (0.021568627450980371, 0.68274885521518547, 0.93022930854674035)),
    (0.24313725490196078, (0.013725490196078438, 0.69169843931936992, 0.92795108985657471)),
    (0.24705882352941178, (0.0058823529411764497, 0.70054303759329095, 0.92563765978155632)),
    (0.25098039215686274, (0.0019607843137254832, 0.70928130760585339, 0.92328910610548931)),
    (0.25490196078431371, (0.0098039215686274161, 0.71791192306444185, 0.92090551794495368)),
    (0.25882352941176473, (0.01764705882352946, 0.7264335740162241, 0.91848698574592302)),
    (0.2627450980392157, (0.025490196078431393, 0.73484496704697566, 0.91603360128033351)),
    (0.26666666666666666, (0.033333333333333326, 0.74314482547739413, 0.91354545764260087)),
    (0.27058823529411763, (0.041176470588235259, 0.75133188955687324, 0.91102264924608833)),
    (0.27450980392156865, (0.049019607843137303, 0.75940491665470722, 0.90846527181952363)),
    (0.27843137254901962, (0.056862745098039236, 0.7673626814486969, 0.9058734224033671)),
    (0.28235294117647058, (0.064705882352941169, 0.77520397611112979, 0.90324719934612885)),
    (0.28627450980392155, (0.072549019607843102, 0.78292761049210269, 0.90058670230063742)),
    (0.29019607843137257, (0.080392156862745145, 0.79053241230016336, 0.89789203222025804)),
    (0.29411764705882354, (0.088235294117647078, 0.79801722728023949, 0.89516329135506234)),
    (0.29803921568627451, (0.096078431372549011, 0.80538091938883261, 0.8924005832479478)),
    (0.30196078431372547, (0.10392156862745094, 0.81262237096644563, 0.88960401273070955)),
    (0.30588235294117649, (0.11176470588235299, 0.81974048290722112, 0.88677368592006189)),
    (0.30980392156862746, (0.11960784313725492, 0.8267341748257635, 0.88390971021361198)),
    (0.31372549019607843, (0.12745098039215685, 0.8336023852211194, 0.88101219428578448)),
    (0.31764705882352939, (0.13529411764705879, 0.84034407163789271, 0.87808124808369792)),
    (0.32156862745098042, (0.14313725490196083, 0.84695821082446709, 0.87511698282299266)),
    (0.32549019607843138, (0.15098039215686276, 0.8534437988883159, 0.87211951098361085)),
    (0.32941176470588235, (0.1588235294117647, 0.85979985144837234, 0.86908894630552835)),
    (0.33333333333333331, (0.16666666666666663, 0.8660254037844386, 0.86602540378443871)),
    (0.33725490196078434, (0.17450980392156867, 0.87211951098361085, 0.86292899966738967)),
    (0.3411764705882353, (0.18235294117647061, 0.87808124808369792, 0.85979985144837245)),
    (0.34509803921568627, (0.19019607843137254, 0.88390971021361198, 0.85663807786386281)),
    (0.34901960784313724, (0.19803921568627447, 0.88960401273070955, 0.85344379888831601)),
    (0.35294117647058826, (0.20588235294117652, 0.89516329135506234, 0.85021713572961422)),
    (0.35686274509803922, (0.21372549019607845, 0.90058670230063742, 0.84695821082446709)),
    (0.36078431372549019, (0.22156862745098038, 0.9058734224033671, 0.8436671478337664)),
    (0.36470588235294116, (0.22941176470588232, 0.91102264924608822, 0.84034407163789271)),
    (0.36862745098039218, (0.23725490196078436, 0.91603360128033351, 0.83698910833197782)),
    (0.37254901960784315, (0.24509803921568629, 0.92090551794495357, 0.83360238522111951)),
    (0.37647058823529411, (0.25294117647058822, 0.92563765978155621, 0.8301840308155507)),
    (0.38039215686274508, (0.26078431372549016, 0.93022930854674024, 0.8267341748257635)),
    (0.3843137254901961, (0.2686274509803922, 0.93467976732111069, 0.82325294815758721)),
    (0.38823529411764707, (0.27647058823529413, 0.93898836061505653, 0.81974048290722112)),
    (0.39215686274509803, (0.28431372549019607, 0.94315443447127745, 0.81619691235622172)),
    (0.396078431372549, (0.292156862745098, 0.94717735656404023, 0.81262237096644563)),
    (0.40000000000000002, (0.30000000000000004, 0.95105651629515353, 0.80901699437494745)),
    (0.40392156862745099, (0.30784313725490198, 0.95479132488664431, 0.80538091938883261)),
    (0.40784313725490196, (0.31568627450980391, 0.95838121547012223, 0.80171428398006672)),
    (0.41176470588235292, (0.32352941176470584, 0.96182564317281904, 0.7980172272802396)),
    (0.41568627450980394, (0.33137254901960789, 0.96512408520028903, 0.79428988957528612)),
    (0.41960784313725491, (0.33921568627450982, 0.96827604091575892, 0.79053241230016336)),
    (0.42352941176470588, (0.34705882352941175, 0.97128103191611381, 0.78674493803348322)),
    (0.42745098039215684, (0.35490196078431369, 0.97413860210451009, 0.7829276104921028)),
    (0.43137254901960786, (0.36274509803921573, 0.97684831775960068, 0.77908057452567037)),
    (0.43529411764705883, (0.37058823529411766, 0.97940976760136589, 0.77520397611112979)),
    (0.4392156862745098, (0.3784313725490196, 0.98182256285353686, 0.77129796234718073)),
    (0.44313725490196076, (0.38627450980392153, 0.98408633730260442, 0.76736268144869701)),
    (0.44705882352941179, (0.39411764705882357, 0.98620074735340257, 0.763398282741103)),
    (0.45098039215686275, (0.40196078431372551, 0.98816547208125938, 0.75940491665470711)),
    (0.45490196078431372, (0.40980392156862744, 0.98998021328070696, 0.75538273471899375)),
    (0.45882352941176469, (0.41764705882352937, 0.99164469551074275, 0.75133188955687336)),
    (0.46274509803921571, (0.42549019607843142, 0.99315866613663617, 0.74725253487889098)),
    (0.46666666666666667, (0.43333333333333335, 0.99452189536827329, 0.74314482547739424)),
    (0.47058823529411764, (0.44117647058823528, 0.99573417629503447, 0.73900891722065909)),
    (0.47450980392156861, (0.44901960784313721, 0.99679532491719913, 0.73484496704697577)),
    (0.47843137254901963, (0.45686274509803926, 0.99770518017387289, 0.73065313295869316)),
    (0.4823529411764706, (0.46470588235294119, 0.99846360396743394, 0.72643357401622421)),
    (0.48627450980392156, (0.47254901960784312, 0.99907048118449315, 0.72218645033200934)),
    (0.49019607843137253, (0.48039215686274506, 0.9995257197133659, 0.71791192306444196)),
    (0.49411764705882355, (0.4882352941176471, 0.99982925045805271, 0.71361015441175235)),
    (0.49803921568627452, (0.49607843137254903, 0.99998102734872685, 0.70928130760585351)),
    (0.50196078431372548, (0.50392156862745097, 0.99998102734872685, 0.70492554690614717)),
    (0.50588235294117645, (0.5117647058823529, 0.99982925045805271, 0.70054303759329095)),
    (0.50980392156862742, (0.51960784313725483, 0.9995257197133659, 0.69613394596292666)),
    (0.51372549019607838, (0.52745098039215677, 0.99907048118449315, 0.69169843931937014)),
    (0.51764705882352946, (0.53529411764705892, 0.99846360396743394, 0.68723668596926268)),
    (0.52156862745098043, (0.54313725490196085, 0.99770518017387289, 0.68274885521518547)),
    (0.52549019607843139, (0.55098039215686279, 0.99679532491719913, 0.67823511734923403)),
    (0.52941176470588236, (0.55882352941176472, 0.99573417629503458, 0.67369564364655721)),
    (0.53333333333333333, (0.56666666666666665, 0.9945218953682734, 0.66913060635885824)),
    (0.53725490196078429, (0.57450980392156858, 0.99315866613663617, 0.66454017870785809)),
    (0.54117647058823526, (0.58235294117647052, 0.99164469551074275, 0.65992453487872271)),
    (0.54509803921568623, (0.59019607843137245, 0.98998021328070696, 0.65528385001345368)),
    (0.5490196078431373, (0.59803921568627461, 0.98816547208125938, 0.65061830020424205)),
    (0.55294117647058827, (0.60588235294117654, 0.98620074735340257, 0.64592806248678725)),
    (0.55686274509803924, (0.61372549019607847, 0.98408633730260442, 0.64121331483357835)),
    (0.5607843137254902, (0.6215686274509804, 0.98182256285353686, 0.63647423614714138)),
    (0.56470588235294117, (0.62941176470588234, 0.97940976760136589, 0.63171100625325105)),
    (0.56862745098039214, (0.63725490196078427, 0.97684831775960079, 0.62692380589410657)),
    (0.5725490196078431, (0.6450980392156862, 0.9741386021045102, 0.622112816721474)),
    (0.57647058823529407, (0.65294117647058814, 0.97128103191611392, 0.61727822128979304)),
    (0.58039215686274515, (0.66078431372549029, 0.96827604091575881, 0.61242020304924993)),
    (0.58431372549019611, (0.66862745098039222, 0.96512408520028903, 0.60753894633881689)),
    (0.58823529411764708, (0.67647058823529416, 0.96182564317281904, 0.60263463637925641)),
    (0.59215686274509804, (0.68431372549019609, 0.95838121547012223, 0.59770745926609359)),
    (0.59607843137254901, (0.69215686274509802, 0.95479132488664431, 0.59275760196255489)),
    (0.59999999999999998, (0.69999999999999996, 0.95105651629515364, 0.58778525229247314)),
    (0.60392156862745094, (0.70784313725490189, 0.94717735656404023, 0.58279059893316099)),
    (0.60784313725490191, (0.71568627450980382, 0.94315443447127756, 0.57777383140825112)),
    (0.61176470588235299, (0.72352941176470598, 0.93898836061505653, 0.57273514008050519)),
    (0.61568627450980395, (0.73137254901960791, 0.93467976732111058, 0.56767471614459009)),
    (0.61960784313725492, (0.73921568627450984, 0.93022930854674035, 0.56259275161982314)),
    (0.62352941176470589, (0.74705882352941178, 0.92563765978155632, 0.55748943934288553)),
    (0.62745098039215685, (0.75490196078431371, 0.92090551794495368, 0.55236497296050591)),
    (0.63137254901960782, (0.76274509803921564, 0.91603360128033351, 0.54721954692211117)),
    (0.63529411764705879, (0.77058823529411757, 0.91102264924608845, 0.54205335647244945)),
    (0.63921568627450975, (0.77843137254901951, 0.90587342240336732, 0.53686659764418021)),
    (0.64313725490196083, (0.78627450980392166, 0.90058670230063742, 0.53165946725043611)),
    (0.6470588235294118, (0.79411764705882359, 0.89516329135506234, 0.52643216287735584)),
    (0.65098039215686276, (0.80196078431372553, 0.88960401273070955, 0.52118488287658515)),
    (0.65490196078431373, (0.80980392156862746, 0.88390971021361209, 0.51591782635775119)),
    (0.6588235294117647, (0.81764705882352939, 0.87808124808369803, 0.51063119318090699)),
    (0.66274509803921566, (0.82549019607843133, 0.87211951098361096, 0.5053251839489481)),
    (0.66666666666666663, (0.83333333333333326, 0.86602540378443871, 0.50000000000000011)),
    (0.6705882352941176, (0.84117647058823519, 0.85979985144837257, 0.49465584339977897)),
    (0.67450980392156867, (0.84901960784313735, 0.8534437988883159, 0.48929291693392352)),
    (0.67843137254901964, (0.85686274509803928, 0.84695821082446709, 0.48391142410030158)),
    (0.68235294117647061, (0.86470588235294121, 0.84034407163789271, 0.4785115691012865)),
    (0.68627450980392157, (0.87254901960784315, 0.83360238522111951, 0.47309355683601007)),
    (0.69019607843137254, (0.88039215686274508, 0.8267341748257635, 0.46765759289258679)),
    (0.69411764705882351, (0.88823529411764701, 0.81974048290722112, 0.46220388354031322)),
    (0.69803921568627447, (0.89607843137254894, 0.81262237096644563, 0.45673263572184064)),
    (0.70196078431372544, (0.90392156862745088, 0.80538091938883272, 0.45124405704532283)),
    (0.70588235294117652, (0.91176470588235303, 0.7980172272802396, 0.44573835577653831)),
    (0.70980392156862748, (0.91960784313725497, 0.79053241230016347, 0.44021574083098741)),
    (0.71372549019607845, (0.9274509803921569, 0.78292761049210291, 0.43467642176596505)),
    (0.71764705882352942, (0.93529411764705883, 0.77520397611113001, 0.42912060877260905)),
    (0.72156862745098038, (0.94313725490196076, 0.76736268144869713, 0.42354851266792443)),
    (0.72549019607843135, (0.9509803921568627, 0.75940491665470733, 0.41796034488678357)),
    (0.72941176470588232, (0.95882352941176463, 0.75133188955687347, 0.41235631747390367)),
    (0.73333333333333328, (0.96666666666666656, 0.74314482547739447, 0.40673664307580037)),
    (0.73725490196078436, (0.97450980392156872, 0.73484496704697566, 0.40110153493271877)),
    (0.74117647058823533, (0.98235294117647065, 0.7264335740162241, 0.39545120687054258)),
    (0.74509803921568629, (0.99019607843137258, 0.71791192306444196, 0.38978587329267939)),
    (0.74901960784313726, (0.99803921568627452, 0.70928130760585351, 0.38410574917192591)),
    (0.75294117647058822, (1.0, 0.70054303759329106, 0.37841105004231035)),
    (0.75686274509803919, (1.0, 0.69169843931937014, 0.37270199199091408)),
    (0.76078431372549016, (1.0, 0.68274885521518558, 0.36697879164967218)),
    (0.76470588235294112, (1.0, 0.67369564364655743, 0.36124166618715303)),
    (0.7686274509803922, (1.0, 0.66454017870785786, 0.35549083330031794)),
    (0.77254901960784317, (1.0, 0.65528385001345346, 0.34972651120626108)),
    (0.77647058823529413, (1.0, 0.64592806248678725, 0.34394891863392807)),
    (0.7803921568627451, (1.0, 0.63647423614714138, 0.33815827481581706)),
    (0.78431372549019607, (1.0, 0.62692380589410646, 0.33235479947965962)),
    (0.78823529411764703, (1.0, 0.61727822128979293, 0.32653871284008329)),
    (0.792156862745098, (1.0, 0.60753894633881689, 0.32071023559025519)),
    (0.79607843137254897, (1.0, 0.5977074592660937, 0.31486958889350791)),
    (0.80000000000000004, (1.0, 0.58778525229247325, 0.30901699437494745)),
    (0.80392156862745101, (1.0, 0.57777383140825123, 0.30315267411304359)),
    (0.80784313725490198, (1.0, 0.56767471614459031, 0.29727685063120274)),
    (0.81176470588235294, (1.0, 0.55748943934288575, 0.29138974688932473)),
    (0.81568627450980391, (1.0, 0.54721954692211139, 0.28549158627534216)),
    (0.81960784313725488, (1.0, 0.53686659764418021, 0.27958259259674395)),
    (0.82352941176470584, (1.0, 0.52643216287735606, 0.273662990072083)),
    (0.82745098039215681, (1.0, 0.51591782635775141, 0.26773300332246808)),
    (0.83137254901960789, (1.0, 0.50532518394894799, 0.26179285736304025)),
    (0.83529411764705885, (1.0, 0.49465584339977881, 0.25584277759443558)),
    (0.83921568627450982, (1.0, 0.48391142410030158, 0.24988298979423082)),
    (0.84313725490196079, (1.0, 0.47309355683601012, 0.24391372010837717)),
    (0.84705882352941175, (1.0, 0.46220388354031328, 0.23793519504261881)),
    (0.85098039215686272, (1.0, 0.45124405704532289, 0.23194764145389821)),
    (0.85490196078431369, (1.0, 0.44021574083098747, 0.22595128654174773)),
    (0.85882352941176465, (1.0, 0.4291206087726091, 0.2199463578396687)),
    (0.86274509803921573, (1.0, 0.41796034488678324, 0.21393308320649734)),
    (0.8666666666666667, (1.0, 0.40673664307580004, 0.20791169081775923)),
    (0.87058823529411766, (1.0, 0.39545120687054242, 0.2018824091570102)),
    (0.87450980392156863, (1.0, 0.38410574917192575, 0.1958454670071669)),
    (0.8784313725490196, (1.0, 0.37270199199091436, 0.18980109344182594)),
    (0.88235294117647056, (1.0, 0.36124166618715331, 0.18374951781657053)),
    (0.88627450980392153, (1.0, 0.34972651120626158, 0.17769096976026882)),
    (0.8901960784313725, (1.0, 0.33815827481581756, 0.17162567916635985)),
    (0.89411764705882357, (1.0, 0.32653871284008334, 0.16555387618413001)),
    (0.89803921568627454, (1.0, 0.31486958889350797, 0.15947579120998084)),
    (0.90196078431372551, (1.0, 0.30315267411304364, 0.15339165487868545)),
    (0.90588235294117647, (1.0, 0.29138974688932479, 0.14730169805463758)),
    (0.90980392156862744, (1.0, 0.27958259259674401, 0.14120615182309149)),
    (0.9137254901960784, (1.0, 0.26773300332246813, 0.13510524748139308)),
    (0.91764705882352937, (1.0, 0.25584277759443586, 0.12899921653020341)),
    (0.92156862745098034, (1.0, 0.24391372010837745, 0.12288829066471427)),
    (0.92549019607843142, (1.0, 0.23194764145389804, 0.11677270176585626)),
    (0.92941176470588238, (1.0, 0.21994635783966857, 0.11065268189150082)),
    (0.93333333333333335, (1.0, 0.20791169081775931, 0.10452846326765346)),
    (0.93725490196078431, (1.0, 0.19584546700716696, 0.098400278279642706)),
    (0.94117647058823528, (1.0, 0.18374951781657037, 0.092268359463302016)),
    (0.94509803921568625, (1.0, 0.17162567916635971, 0.086132939496146033)),
    (0.94901960784313721, (1.0, 0.1594757912099809, 0.079994251188541685)),
    (0.95294117647058818, (1.0, 0.14730169805463766, 0.07385252747487403)),
    (0.95686274509803926, (1.0, 0.13510524748139313, 0.067708001404707535)),
    (0.96078431372549022, (1.0, 0.12288829066471434, 0.061560906133942946)),
    (0.96470588235294119, (1.0, 0.1106526818915011, 0.05541147491597008)),
    (0.96862745098039216, (1.0, 0.098400278279642997, 0.049259941092816992)),
    (0.97254901960784312, (1.0, 0.086132939496146324, 0.043106538086295734)),
    (0.97647058823529409, (1.0, 0.073852527474874308, 0.036951499389145069)),
    (0.98039215686274506, (1.0, 0.06156090613394323, 0.030795058556170547)),
    (0.98431372549019602, (1.0, 0.049259941092817276, 0.024637449195382185)),
    (0.9882352941176471, (1.0, 0.03695149938914491, 0.018478904959129915)),
    (0.99215686274509807, (1.0, 0.024637449195382025, 0.012319659535238468)),
    (0.99607843137254903, (1.0, 0.012319659535238529, 0.0061599466381386907)),
    (1.0, (1.0, 1.2246467991473532e-16, 6.123233995736766e-17)),
)
